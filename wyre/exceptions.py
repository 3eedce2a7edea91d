"""Exception classes for the Wyre SDK."""

from enum import Enum
from typing import Any, Optional

from pydantic import ValidationError

from wyre.types.errors import ApiError, ApiErrorKind, UnrecognizedErrorKind


class WyreError(Exception):
    """Base exception for everything raised by this library."""


# ==================== Decoding ====================


class SrnDecodeError(WyreError, ValueError):
    """Raised when a string is not a valid System Resource Name."""

    def __init__(self, message: str, text: str) -> None:
        self.text = text
        super().__init__(message)


class MissingSrnType(SrnDecodeError):
    """Raised when the SRN has no ``type:`` prefix."""

    def __init__(self, text: str) -> None:
        super().__init__(f"missing SRN type in {text!r}", text)


class UnknownSrnVariant(SrnDecodeError):
    """Raised when the SRN type prefix is not one this library knows."""

    def __init__(self, tag: str, expected: list[str], text: str) -> None:
        self.tag = tag
        self.expected = expected
        super().__init__(
            f"unknown SRN type {tag!r}, expected one of: {', '.join(expected)}",
            text,
        )


class UnrecognizedFieldType(WyreError, ValueError):
    """Raised when a profile field carries an unknown ``fieldType``."""

    def __init__(self, field_type: Any, expected: list[str]) -> None:
        self.field_type = field_type
        self.expected = expected
        super().__init__(
            f"unrecognized field type {field_type!r}, expected one of: {', '.join(expected)}"
        )


class ResponseDecodeError(WyreError):
    """Raised when a response body does not match the expected schema.

    This usually means the API changed in a way this release does not
    understand; retrying the same request will not help. When the mismatch
    is an unknown SRN type or profile field type, the codec error is kept
    on ``codec_error`` and chained as the cause.
    """

    retryable = False

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Optional[str] = None,
        codec_error: Optional[ValueError] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        self.codec_error = codec_error
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.status_code}] undecodable response: {self.message}"


def find_codec_error(exc: ValidationError) -> Optional[ValueError]:
    """Return the first SRN or field type error behind a validation failure."""
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, (SrnDecodeError, UnrecognizedFieldType)):
            return cause
    return None


# ==================== Transport ====================


class TransportError(WyreError):
    """Raised when the request could not be completed (DNS, TLS, timeout, reset)."""

    retryable = True


# ==================== API ====================


class WyreAPIError(WyreError):
    """Base exception for errors reported by the Wyre API."""

    def __init__(self, error: ApiError, status_code: int) -> None:
        self.error = error
        self.status_code = status_code
        self.exception_id = error.exception_id
        self.kind = error.type
        self.error_code = error.error_code
        self.message = error.message
        self.language = error.language
        self.transient = error.transient
        super().__init__(error.message)

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.error_code or self.kind}: {self.message}"


class RequestValidationError(WyreAPIError):
    """The action failed due to problems with the request."""


class InvalidValue(RequestValidationError):
    """A value was invalid."""


class FieldRequired(RequestValidationError):
    """A required field was missing."""


class InsufficientFunds(WyreAPIError):
    """More funds were requested in a currency than were available."""


class AccessDenied(WyreAPIError):
    """The credentials lack privilege for the requested action."""


class TransferFailed(WyreAPIError):
    """There was a problem completing the transfer request."""


class MFARequired(WyreAPIError):
    """An MFA action is required. Not expected when using API keys."""


class CustomerSupportRequired(WyreAPIError):
    """Wyre support must be contacted to resolve the problem."""


class NotFound(WyreAPIError):
    """The referenced resource could not be located."""


class RateLimitExceeded(WyreAPIError):
    """Usage restrictions were exceeded."""


class AccountLocked(WyreAPIError):
    """The account has been locked for potential fraud reasons."""


class LockedOut(WyreAPIError):
    """The account or IP has been blocked for malicious behavior."""


class UnknownServerError(WyreAPIError):
    """An internal problem on the Wyre side."""


# Mapping from error kinds to exception classes
ERROR_KIND_MAP: dict[ApiErrorKind, type[WyreAPIError]] = {
    ApiErrorKind.VALIDATION: RequestValidationError,
    ApiErrorKind.INVALID_VALUE: InvalidValue,
    ApiErrorKind.FIELD_REQUIRED: FieldRequired,
    ApiErrorKind.INSUFFICIENT_FUNDS: InsufficientFunds,
    ApiErrorKind.ACCESS_DENIED: AccessDenied,
    ApiErrorKind.TRANSFER: TransferFailed,
    ApiErrorKind.MFA_REQUIRED: MFARequired,
    ApiErrorKind.CUSTOMER_SUPPORT: CustomerSupportRequired,
    ApiErrorKind.NOT_FOUND: NotFound,
    ApiErrorKind.RATE_LIMIT: RateLimitExceeded,
    ApiErrorKind.ACCOUNT_LOCKED: AccountLocked,
    ApiErrorKind.LOCKOUT: LockedOut,
    ApiErrorKind.UNKNOWN: UnknownServerError,
}


def raise_for_error_response(
    status_code: int,
    response_data: Any,
) -> None:
    """Raise the appropriate exception based on the API error response."""
    try:
        error = ApiError.model_validate(response_data)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"error body does not match the ApiError schema: {exc.error_count()} problem(s)",
            status_code,
            body=repr(response_data),
        ) from exc

    if isinstance(error.type, UnrecognizedErrorKind):
        raise WyreAPIError(error, status_code)
    raise ERROR_KIND_MAP[error.type](error, status_code)


def is_retryable(exc: BaseException) -> bool:
    """Check whether a failed call may be re-attempted unchanged.

    Advisory only: the client never retries on its own.
    """
    if isinstance(exc, TransportError):
        return True
    if isinstance(exc, WyreAPIError):
        return exc.transient
    return False


# ==================== Configuration ====================


class ConfigErrorKind(str, Enum):
    """Reason a client could not be built from the environment."""

    MISSING_API_KEY = "MissingApiKey"
    MISSING_API_SECRET = "MissingApiSecret"
    MISSING_ENVIRONMENT = "MissingEnvironment"
    ENVIRONMENT_PARSE_ERROR = "EnvironmentParseError"


class EnvironmentParseError(ValueError):
    """Could not parse an environment name; keeps the original string."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"unknown environment {value!r}, expected test or production")


class ConfigurationError(Exception):
    """Raised when credentials or the environment cannot be loaded."""

    def __init__(self, kind: ConfigErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

