"""
Initialize the database: create all tables and seed the ward beds.
Run with: python -m scripts.init_db
"""

import asyncio
from hospitalcare.config import get_settings
from hospitalcare.storage.database import DatabaseStorage


async def init():
    settings = get_settings()
    print(f"Creating database tables at {settings.database_url} ...")
    storage = DatabaseStorage(settings.database_url)
    await storage.startup()
    beds = await storage.get_all_beds()
    print(f"All tables created successfully ({len(beds)} beds on record).")
    await storage.shutdown()


if __name__ == "__main__":
    asyncio.run(init())
