"""Error taxonomy of the request pipeline and its HTTP mapping."""

from typing import Any, Dict, List, Optional


class RedditApiError(Exception):
    """Base class for failures that map to an HTTP error response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_content(self) -> Any:
        return {"message": self.message}


class ValidationError(RedditApiError):
    """Malformed or missing required fields. Carries one entry per invalid field."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, details: List[Dict[str, Any]]):
        self.details = details
        super().__init__("; ".join(d["message"] for d in details) or self.default_message)

    def to_content(self) -> Any:
        return self.details


class Conflict(RedditApiError):
    status_code = 409
    default_message = "Resource already exists"


class NotFound(RedditApiError):
    status_code = 404
    default_message = "Resource not found"


class InternalError(RedditApiError):
    """Any unhandled store or connection failure. Details are logged, never exposed."""

    status_code = 500
