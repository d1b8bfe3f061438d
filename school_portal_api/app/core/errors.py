"""
Error taxonomy for the service layer.

Services raise these exceptions; the application converts them into an
HTTP status code and a plain‑text message at the handler boundary (see
``main.create_app``).  Nothing here knows about HTTP beyond the numeric
status attached to each class.
"""


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """A required field is missing or empty."""

    status_code = 400


class NotFoundError(ServiceError):
    """No row matches the requested identifier or email."""

    status_code = 404


class AuthError(ServiceError):
    """The supplied password does not match the stored hash."""

    status_code = 401


class InfrastructureError(ServiceError):
    """Database or hashing failure.

    The message is what the client sees, so it must stay generic; driver
    details belong in the log, not in the response.
    """

    status_code = 500
