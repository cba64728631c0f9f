"""Exception hierarchy for fittrack."""

from typing import Any

import httpx


class FitTrackError(Exception):
    """Base class for all fittrack errors."""


class ValidationError(FitTrackError):
    """Client-side validation failed.

    ``field_errors`` maps a form field name to the message shown next to it.
    Errors that are not tied to a single field use the ``"form"`` key.
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        super().__init__("; ".join(self.field_errors.values()) or "Invalid input")

    @classmethod
    def single(cls, message: str, field: str = "form") -> "ValidationError":
        return cls({field: message})


class InvalidTransitionError(FitTrackError):
    """A state machine was asked to make a transition it does not allow."""


class ApiError(FitTrackError):
    """The API answered with an error status."""

    def __init__(
        self,
        status_code: int,
        detail: str | None = None,
        response: httpx.Response | None = None,
    ):
        self.status_code = status_code
        self.detail = detail
        self.response = response
        super().__init__(detail or f"Request failed with status {status_code}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Build the error matching the response status."""
        detail = extract_detail(response)
        error_cls = AuthenticationError if response.status_code == 401 else cls
        return error_cls(response.status_code, detail, response)

    def message(self, fallback: str) -> str:
        """Server-provided message, or the fallback when there is none."""
        return self.detail or fallback


class AuthenticationError(ApiError):
    """The API rejected our credentials."""


class SessionExpiredError(AuthenticationError):
    """The refresh token was rejected; stored tokens have been cleared."""

    def __init__(self, response: httpx.Response | None = None, detail: str | None = None):
        super().__init__(401, detail or "Session expired. Please log in again.", response)


def extract_detail(response: httpx.Response) -> str | None:
    """Pull a human readable message out of an error response body."""
    try:
        body: Any = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:200] or None

    if isinstance(body, dict):
        detail = body.get("detail") or body.get("message") or body.get("error")
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list):
            # FastAPI style validation errors
            messages = [item.get("msg", "") for item in detail if isinstance(item, dict)]
            return "; ".join(m for m in messages if m) or None
    return None

