"""
Application Exceptions

Typed errors raised by the validation chain and the services.
Each error carries the HTTP status the API layer renders it with.
"""


class ApplicationError(Exception):
    """Base class for errors surfaced verbatim to API callers."""

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to the JSON error body."""
        return {"error": self.message}

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.status_code}: {self.message}>"


class ValidationError(ApplicationError):
    """Malformed or missing input, or an illegal state transition."""

    status_code = 400


class NotFoundError(ApplicationError):
    """Referenced dish or order does not exist."""

    status_code = 404
