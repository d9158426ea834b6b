class HospitalCareError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(HospitalCareError):
    status_code = 400
    default_message = "Validation error"


class Unauthorized(HospitalCareError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(HospitalCareError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(HospitalCareError):
    status_code = 404
    default_message = "Not found"
