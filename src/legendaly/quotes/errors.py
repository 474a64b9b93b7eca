"""Quote generation exceptions and error classification."""

import errno
import socket
from enum import Enum

import httpx
import openai


class ErrorKind(str, Enum):
    """Coarse failure categories used by retry policy and user messages."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    UNKNOWN = "unknown"


class QuoteError(Exception):
    """Base exception for quote generation errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class QuoteAuthError(QuoteError):
    """Exception raised for authentication failures.

    This typically occurs when:
    - OPENAI_API_KEY is missing or invalid
    - The key lacks permission for the requested model
    """

    kind = ErrorKind.AUTH


class QuoteAPIError(QuoteError):
    """Exception raised for model API communication errors.

    This typically occurs when:
    - The API host cannot be reached (DNS failure, refused connection)
    - Rate limits are exceeded (429 error)
    - The API server fails (5xx errors)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
        kind: ErrorKind = ErrorKind.UNKNOWN,
    ) -> None:
        super().__init__(message, original_error)
        self.status_code = status_code
        self.kind = kind


_AUTH_STATUSES = {401, 403}
_RATE_LIMIT_STATUS = 429
_NETWORK_ERRNOS = {
    errno.ECONNREFUSED,
    errno.ECONNRESET,
    errno.EHOSTUNREACH,
    errno.ENETUNREACH,
}
_NETWORK_CODES = {"ENOTFOUND", "ECONNREFUSED", "EAI_AGAIN", "EAI_NONAME"}


def error_status(error: BaseException) -> int | None:
    """Return the HTTP status attached to an error, if any."""
    status = getattr(error, "status_code", None)
    if status is None:
        status = getattr(error, "status", None)
    return status if isinstance(status, int) else None


def classify_error(error: BaseException) -> ErrorKind:
    """Translate a library or transport error into an ErrorKind.

    This is the only place that inspects library-specific error shapes;
    retry policy and user messages work on the returned kind.

    Args:
        error: Exception raised by the model call

    Returns:
        ErrorKind describing the failure
    """
    if isinstance(error, QuoteError):
        return error.kind

    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return ErrorKind.AUTH
    if isinstance(error, openai.RateLimitError):
        return ErrorKind.RATE_LIMIT

    status = error_status(error)
    if status in _AUTH_STATUSES:
        return ErrorKind.AUTH
    if status == _RATE_LIMIT_STATUS:
        return ErrorKind.RATE_LIMIT

    network_types = (
        openai.APIConnectionError,
        httpx.TransportError,
        ConnectionError,
        socket.gaierror,
    )
    if isinstance(error, network_types):
        return ErrorKind.NETWORK
    if getattr(error, "errno", None) in _NETWORK_ERRNOS:
        return ErrorKind.NETWORK
    if getattr(error, "code", None) in _NETWORK_CODES:
        return ErrorKind.NETWORK

    return ErrorKind.UNKNOWN


def wrap_error(error: Exception) -> QuoteError:
    """Wrap a raw model-call exception in the matching QuoteError subclass."""
    if isinstance(error, QuoteError):
        return error

    kind = classify_error(error)
    if kind is ErrorKind.AUTH:
        return QuoteAuthError(f"Authentication failed: {error}", error)
    if kind is ErrorKind.RATE_LIMIT:
        return QuoteAPIError(
            f"Rate limit exceeded: {error}", error_status(error) or 429, error, kind
        )
    if kind is ErrorKind.NETWORK:
        return QuoteAPIError(f"Network error: {error}", None, error, kind)
    return QuoteAPIError(f"API call failed: {error}", error_status(error), error, kind)
