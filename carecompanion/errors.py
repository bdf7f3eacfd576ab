# carecompanion/errors.py
"""Error taxonomy shared by the data access layer and the API handlers.

Every handler either returns a success payload or lets one of these
propagate to the error handlers registered in ``create_app``.
"""


class CareCompanionError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None, **payload):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.payload = payload

    def to_dict(self):
        body = {"success": False, "message": self.message}
        body.update(self.payload)
        return body


class Unauthenticated(CareCompanionError):
    status_code = 401
    message = "Unauthorized"


class InvalidInput(CareCompanionError):
    status_code = 400
    message = "Invalid input"

    def __init__(self, errors, message=None):
        # errors: {wireField: reason}
        super().__init__(message, errors=errors)
        self.errors = errors


class NotFound(CareCompanionError):
    status_code = 404
    message = "Not found"


class ConstraintViolation(CareCompanionError):
    status_code = 400
    message = "Constraint violation"


class InternalError(CareCompanionError):
    status_code = 500
    message = "Internal server error"
