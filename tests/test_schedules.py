import pytest


def schedule_payload(doctor_id, day="monday", start="09:00", end="12:00", activity="clinic"):
    return {"doctorId": doctor_id, "day": day, "startTime": start, "endTime": end, "activityType": activity}


@pytest.fixture
def timetable(client, people, auth):
    """Entries for both doctors, created in interleaved order."""
    nurse = auth(people["nurse"])
    created = []
    for doctor, day in [("doctor2", "monday"), ("doctor", "monday"), ("doctor2", "tuesday"), ("doctor", "friday")]:
        response = client.post("/api/schedules", json=schedule_payload(people[doctor].id, day), headers=nurse)
        assert response.status_code == 201
        created.append(response.json())
    return created


def test_doctor_creates_own_schedule(client, people, auth):
    doctor = people["doctor"]

    response = client.post("/api/schedules", json=schedule_payload(doctor.id, activity="surgery"), headers=auth(doctor))

    assert response.status_code == 201
    assert response.json() == {"id": 1, "doctorId": doctor.id, "day": "monday",
                               "startTime": "09:00", "endTime": "12:00", "activityType": "surgery"}


def test_doctor_cannot_create_for_colleague(client, people, auth):
    response = client.post("/api/schedules", json=schedule_payload(people["doctor2"].id), headers=auth(people["doctor"]))

    assert response.status_code == 403
    assert response.json()["message"] == "You can only create schedules for yourself"


def test_patient_cannot_create_schedules(client, people, auth):
    response = client.post("/api/schedules", json=schedule_payload(people["doctor"].id), headers=auth(people["patient"]))
    assert response.status_code == 403


def test_overlapping_entries_are_accepted(client, people, auth):
    headers = auth(people["nurse"])
    first = client.post("/api/schedules", json=schedule_payload(people["doctor"].id), headers=headers)
    second = client.post("/api/schedules", json=schedule_payload(people["doctor"].id, start="10:00"), headers=headers)
    assert (first.status_code, second.status_code) == (201, 201)


@pytest.mark.parametrize("field,value", [("startTime", "9am"), ("endTime", "25:00"), ("day", "someday")])
def test_malformed_schedule_is_400(client, people, auth, field, value):
    payload = schedule_payload(people["doctor"].id)
    payload[field] = value
    response = client.post("/api/schedules", json=payload, headers=auth(people["doctor"]))
    assert response.status_code == 400


def test_doctor_lists_only_own(client, people, auth, timetable):
    response = client.get("/api/schedules", headers=auth(people["doctor"]))
    assert [s["id"] for s in response.json()] == [timetable[1]["id"], timetable[3]["id"]]


@pytest.mark.parametrize("role", ["nurse", "patient"])
def test_everyone_else_sees_all_doctors(client, people, auth, timetable, role):
    response = client.get("/api/schedules", headers=auth(people[role]))

    ids = [s["id"] for s in response.json()]
    assert ids == [timetable[1]["id"], timetable[3]["id"], timetable[0]["id"], timetable[2]["id"]]
    assert sorted(ids) == sorted(s["id"] for s in timetable)


def test_schedules_for_one_doctor(client, people, auth, timetable):
    response = client.get(f"/api/schedules/doctor/{people['doctor2'].id}", headers=auth(people["patient"]))
    assert [s["day"] for s in response.json()] == ["monday", "tuesday"]


def test_update_schedule_ownership(client, people, auth, timetable):
    colleague_entry = f"/api/schedules/{timetable[0]['id']}"  # dr.grey

    denied = client.put(colleague_entry, json={"endTime": "13:00"}, headers=auth(people["doctor"]))
    assert denied.status_code == 403
    assert denied.json()["message"] == "You can only update your own schedules"

    by_owner = client.put(colleague_entry, json={"endTime": "13:00"}, headers=auth(people["doctor2"]))
    assert by_owner.status_code == 200
    assert by_owner.json()["endTime"] == "13:00"
    assert by_owner.json()["startTime"] == "09:00"

    by_nurse = client.put(colleague_entry, json={"activityType": "rounds"}, headers=auth(people["nurse"]))
    assert by_nurse.json()["activityType"] == "rounds"
    assert by_nurse.json()["endTime"] == "13:00"


def test_update_missing_schedule_is_404(client, people, auth):
    response = client.put("/api/schedules/50", json={"day": "sunday"}, headers=auth(people["nurse"]))
    assert response.status_code == 404
    assert response.json()["message"] == "Schedule not found"


def test_delete_schedule(client, people, auth, timetable):
    own = f"/api/schedules/{timetable[1]['id']}"
    colleague = f"/api/schedules/{timetable[0]['id']}"
    headers = auth(people["doctor"])

    denied = client.delete(colleague, headers=headers)
    assert denied.status_code == 403
    assert denied.json()["message"] == "You can only delete your own schedules"

    assert client.delete(own, headers=headers).status_code == 204
    assert client.delete(own, headers=headers).status_code == 404
    assert client.delete(colleague, headers=auth(people["nurse"])).status_code == 204
