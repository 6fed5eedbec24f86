"""Error types and HTTP failure mapping."""

from __future__ import annotations

from collections.abc import Mapping

ABORT_REASON_CANCELLED = "cancelled"
ABORT_REASON_TIMEOUT = "timeout"


def extract_message(body: object) -> str | None:
    if not isinstance(body, Mapping):
        return None
    value = body.get("message")
    return str(value) if value else None


def extract_code(body: object) -> object | None:
    if not isinstance(body, Mapping):
        return None
    value = body.get("code")
    return value if value else None


class ResourceApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        code: object | None = None,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.cause = cause


class ResourceValidationError(ResourceApiError):
    """Invalid input or configuration, raised before anything is sent."""


class ResourceClientClosedError(ResourceApiError):
    """Raised when client is used after close."""


class ResourceTransportError(ResourceApiError):
    """Network/transport-level failure."""


class ResourceAbortError(ResourceApiError):
    """Request aborted through its cancellation signal."""

    def __init__(self, message: str, *, reason: str = ABORT_REASON_CANCELLED) -> None:
        super().__init__(message, cause="abort")
        self.reason = reason


class ResourceTimeoutError(ResourceAbortError):
    """Request aborted because its timeout elapsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, reason=ABORT_REASON_TIMEOUT)


class ResourceHttpError(ResourceApiError):
    """Response with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        code: object,
        http_status: int,
        body: object = None,
    ) -> None:
        super().__init__(message, code=code, http_status=http_status, cause="http")
        self.body = body


def abort_error(reason: str | None) -> ResourceAbortError:
    if reason == ABORT_REASON_TIMEOUT:
        return ResourceTimeoutError("request timed out")
    return ResourceAbortError("request was cancelled", reason=reason or ABORT_REASON_CANCELLED)


def classify_http_error(
    body: object,
    *,
    text: str,
    http_status: int,
    reason_phrase: str,
) -> ResourceHttpError:
    """Build the error for a failed response.

    The message is the first non-empty of the body's ``message`` field, the raw
    body text, and the status line reason phrase. The code is the body's ``code``
    field, falling back to the numeric HTTP status.
    """

    message = extract_message(body) or text or reason_phrase
    code = extract_code(body)
    return ResourceHttpError(
        message,
        code=code if code is not None else http_status,
        http_status=http_status,
        body=body,
    )


__all__ = [
    "ABORT_REASON_CANCELLED",
    "ABORT_REASON_TIMEOUT",
    "ResourceApiError",
    "ResourceValidationError",
    "ResourceClientClosedError",
    "ResourceTransportError",
    "ResourceAbortError",
    "ResourceTimeoutError",
    "ResourceHttpError",
    "extract_message",
    "extract_code",
    "abort_error",
    "classify_http_error",
]
