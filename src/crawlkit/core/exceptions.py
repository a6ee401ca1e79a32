"""
Custom exceptions for the CrawlKit client.

Every failure surfaced by the client is a CrawlKitError. Failures that come
back from the API (or from the attempt to reach it) are APIError instances
tagged with an ErrorKind, so callers can branch on ``error.kind`` instead
of walking isinstance chains.

Exception Hierarchy:
    CrawlKitError (base)
    ├── ConfigurationError
    └── APIError                   kind=API (unrecognized API codes)
        ├── AuthenticationError        kind=AUTHENTICATION
        ├── InsufficientCreditsError   kind=INSUFFICIENT_CREDITS
        ├── ValidationError            kind=VALIDATION
        ├── RateLimitError             kind=RATE_LIMITED
        ├── RequestTimeoutError        kind=TIMEOUT
        ├── NotFoundError              kind=NOT_FOUND
        ├── NetworkError               kind=NETWORK
        ├── ResponseParseError         kind=PARSE_ERROR
        └── UnknownError               kind=UNKNOWN
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of classified failure outcomes."""

    AUTHENTICATION = "authentication"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    VALIDATION = "validation"
    RATE_LIMITED = "rate_limited"
    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"
    NETWORK = "network"
    PARSE_ERROR = "parse_error"
    UNKNOWN = "unknown"
    API = "api"


# Kinds worth retrying after a delay
RETRYABLE_KINDS = frozenset(
    {ErrorKind.TIMEOUT, ErrorKind.NETWORK, ErrorKind.RATE_LIMITED}
)

# API codes reporting a failure of the service's own outbound fetch
NETWORK_ERROR_CODES = frozenset(
    {
        "DNS_FAILED",
        "CONNECTION_REFUSED",
        "SSL_ERROR",
        "TOO_MANY_REDIRECTS",
        "PROXY_ERROR",
    }
)


class CrawlKitError(Exception):
    """
    Base exception for all CrawlKit client errors.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary with additional context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(
                f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CrawlKitError):
    """
    Error in configuration loading or validation.

    Raised when:
    - Configuration file is missing or malformed
    - Setting values fail validation (e.g. non-positive timeout)
    """

    pass


# =============================================================================
# API Errors
# =============================================================================


class APIError(CrawlKitError):
    """
    A classified failure of a single API call.

    Instances are read-only: the fields are exposed as properties and
    mirrored into ``details`` for display. Credit fields are None when the
    API did not report them, which is distinct from a reported zero.

    Attributes:
        kind: Tag identifying the failure class
        code: API error code (or client-side code such as TIMEOUT)
        http_status: HTTP status associated with the failure
        credits_refunded: Credits refunded for the failed call, if reported
        credits_remaining: Credits left on the account, if reported
    """

    default_kind: ErrorKind = ErrorKind.API

    def __init__(
        self,
        code: str,
        message: str,
        http_status: int,
        credits_refunded: float | None = None,
        credits_remaining: float | None = None,
        kind: ErrorKind | None = None,
    ) -> None:
        details: dict[str, Any] = {"code": code, "http_status": http_status}
        if credits_refunded is not None:
            details["credits_refunded"] = credits_refunded
        if credits_remaining is not None:
            details["credits_remaining"] = credits_remaining
        super().__init__(message, details)
        self._kind = kind or self.default_kind
        self._code = code
        self._http_status = http_status
        self._credits_refunded = credits_refunded
        self._credits_remaining = credits_remaining

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def code(self) -> str:
        return self._code

    @property
    def http_status(self) -> int:
        return self._http_status

    @property
    def credits_refunded(self) -> float | None:
        return self._credits_refunded

    @property
    def credits_remaining(self) -> float | None:
        return self._credits_remaining

    @property
    def retryable(self) -> bool:
        """Whether repeating the call later may succeed."""
        return self._kind in RETRYABLE_KINDS

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data: dict[str, Any] = {
            "kind": self._kind.value,
            "code": self._code,
            "message": self.message,
            "http_status": self._http_status,
        }
        if self._credits_refunded is not None:
            data["credits_refunded"] = self._credits_refunded
        if self._credits_remaining is not None:
            data["credits_remaining"] = self._credits_remaining
        return data

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(kind={self._kind.value!r}, "
            f"code={self._code!r}, message={self.message!r}, "
            f"http_status={self._http_status!r})"
        )


class AuthenticationError(APIError):
    """
    Invalid or missing API key.

    Raised when:
    - The client is constructed with an empty or malformed key
    - The API answers 401

    Never carries credit fields: authentication failures are not charged.
    NOT retryable without fixing credentials.

    ``code`` is always ``UNAUTHORIZED``, whatever code the API sent. Some
    other CrawlKit SDKs report ``VALIDATION_ERROR`` here, so branch on
    ``kind`` (or this class) rather than on ``code``.
    """

    default_kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Invalid or missing API key") -> None:
        super().__init__("UNAUTHORIZED", message, 401)


class InsufficientCreditsError(APIError):
    """Not enough credits left to perform the operation (402)."""

    default_kind = ErrorKind.INSUFFICIENT_CREDITS

    def __init__(
        self,
        message: str,
        credits_refunded: float | None = None,
        credits_remaining: float | None = None,
    ) -> None:
        super().__init__(
            "INSUFFICIENT_CREDITS", message, 402, credits_refunded, credits_remaining
        )


class ValidationError(APIError):
    """Request parameters were rejected by the API."""

    default_kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        http_status: int = 400,
        credits_refunded: float | None = None,
        credits_remaining: float | None = None,
    ) -> None:
        super().__init__(
            "VALIDATION_ERROR", message, http_status, credits_refunded, credits_remaining
        )


class RateLimitError(APIError):
    """
    Rate limit exceeded (429).

    Retryable after a delay.
    """

    default_kind = ErrorKind.RATE_LIMITED

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        credits_refunded: float | None = None,
        credits_remaining: float | None = None,
    ) -> None:
        super().__init__(
            "RATE_LIMITED", message, 429, credits_refunded, credits_remaining
        )


class RequestTimeoutError(APIError):
    """
    The request did not complete in time (408).

    Client-side timeouts carry no credit information because the server
    state is unknown. Server-reported timeouts keep whatever credit fields
    the API returned.
    """

    default_kind = ErrorKind.TIMEOUT

    def __init__(
        self,
        message: str,
        credits_refunded: float | None = None,
        credits_remaining: float | None = None,
    ) -> None:
        super().__init__("TIMEOUT", message, 408, credits_refunded, credits_remaining)


class NotFoundError(APIError):
    """Resource not found (404)."""

    default_kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str = "Resource not found",
        credits_refunded: float | None = None,
        credits_remaining: float | None = None,
    ) -> None:
        super().__init__("NOT_FOUND", message, 404, credits_refunded, credits_remaining)


class NetworkError(APIError):
    """
    The service failed to fetch the target on its side.

    ``code`` holds the specific cause (DNS_FAILED, SSL_ERROR, ...). The
    status is always 502, whatever status the API call itself returned.
    """

    default_kind = ErrorKind.NETWORK

    def __init__(
        self,
        code: str,
        message: str,
        credits_refunded: float | None = None,
        credits_remaining: float | None = None,
    ) -> None:
        super().__init__(code, message, 502, credits_refunded, credits_remaining)

    @property
    def cause(self) -> str:
        """Network failure sub-code."""
        return self.code


class ResponseParseError(APIError):
    """The API response body could not be parsed as an envelope."""

    default_kind = ErrorKind.PARSE_ERROR

    def __init__(
        self,
        http_status: int,
        message: str = "Failed to parse API response",
    ) -> None:
        super().__init__("PARSE_ERROR", message, http_status)


class UnknownError(APIError):
    """The transport failed before any response was received."""

    default_kind = ErrorKind.UNKNOWN

    def __init__(self, message: str = "An unknown error occurred") -> None:
        super().__init__("UNKNOWN", message, 500)


# =============================================================================
# Classification
# =============================================================================


def create_error_from_response(
    code: str,
    message: str,
    http_status: int,
    credits_refunded: float | None = None,
    credits_remaining: float | None = None,
) -> APIError:
    """
    Map a failed envelope to a concrete API error.

    Unambiguous HTTP statuses win over the body's error code. Credit fields
    are passed along on every branch except authentication.

    Args:
        code: ``error.code`` from the envelope
        message: ``error.message`` from the envelope
        http_status: Status code of the HTTP response
        credits_refunded: ``creditsRefunded`` from the envelope, if any
        credits_remaining: ``creditsRemaining`` from the envelope, if any

    Returns:
        The classified error (not raised)
    """
    if http_status == 401:
        return AuthenticationError(message)
    if http_status == 402:
        return InsufficientCreditsError(message, credits_refunded, credits_remaining)
    if http_status == 429:
        return RateLimitError(message, credits_refunded, credits_remaining)
    if http_status == 404:
        return NotFoundError(message, credits_refunded, credits_remaining)

    if code == "VALIDATION_ERROR":
        return ValidationError(message, http_status, credits_refunded, credits_remaining)
    if code == "INSUFFICIENT_CREDITS":
        return InsufficientCreditsError(message, credits_refunded, credits_remaining)
    if code == "TIMEOUT":
        return RequestTimeoutError(message, credits_refunded, credits_remaining)
    if code == "RATE_LIMITED":
        return RateLimitError(message, credits_refunded, credits_remaining)
    if code == "NOT_FOUND":
        return NotFoundError(message, credits_refunded, credits_remaining)
    if code in NETWORK_ERROR_CODES:
        return NetworkError(code, message, credits_refunded, credits_remaining)

    return APIError(code, message, http_status, credits_refunded, credits_remaining)


# =============================================================================
# Utility Functions
# =============================================================================


def is_retryable(error: Exception) -> bool:
    """
    Check if an error is retryable.

    Args:
        error: The exception to check

    Returns:
        True for timeouts, network failures and rate limiting
    """
    return isinstance(error, APIError) and error.retryable
