"""
Domain errors raised by the services.

Each error carries the HTTP status it maps to and a message that is safe to
show to the caller. The Flask error handler in app.py renders them as
``{"error": message}``.
"""


class JobBoardError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(JobBoardError):
    status_code = 400
    default_message = "All fields are required"


class InvalidCredentials(JobBoardError):
    status_code = 401
    default_message = "Invalid email or password"


class Unauthorized(JobBoardError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(JobBoardError):
    status_code = 404
    default_message = "Not found"


class DuplicateEmail(JobBoardError):
    status_code = 409
    default_message = "Email already in use"


class AlreadyApplied(JobBoardError):
    status_code = 409
    default_message = "You have already applied to this job"


class StoreError(JobBoardError):
    default_message = "Database error"


class HashError(JobBoardError):
    default_message = "Password hashing failed"


class SessionError(JobBoardError):
    default_message = "Logout failed"
