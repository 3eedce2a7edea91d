"""Error payload returned by the API for any non-200 response.

See https://docs.sendwyre.com/docs/errors
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Optional, Union

from pydantic import Field, PlainSerializer, PlainValidator

from wyre.types.common import Unrecognized, WyreModel, open_enum


class ApiErrorKind(str, Enum):
    """Category of an API exception (the payload's ``type`` field)."""

    VALIDATION = "ValidationException"
    INVALID_VALUE = "InvalidValueException"
    FIELD_REQUIRED = "FieldRequiredException"
    INSUFFICIENT_FUNDS = "InsufficientFundsException"
    ACCESS_DENIED = "AccessDeniedException"
    TRANSFER = "TransferException"
    MFA_REQUIRED = "MFARequiredException"
    CUSTOMER_SUPPORT = "CustomerSupportException"
    NOT_FOUND = "NotFoundException"
    RATE_LIMIT = "RateLimitException"
    ACCOUNT_LOCKED = "AccountLockedException"
    LOCKOUT = "LockoutException"
    UNKNOWN = "UnknownException"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnrecognizedErrorKind(Unrecognized):
    """An exception type introduced server-side after this release."""


ErrorKind = Annotated[
    Union[ApiErrorKind, UnrecognizedErrorKind],
    PlainValidator(open_enum(ApiErrorKind, UnrecognizedErrorKind)),
    PlainSerializer(lambda kind: kind.value, return_type=str),
]


class ApiError(WyreModel):
    """Error body of a failed request."""

    exception_id: str = Field(..., description="Unique id, useful when contacting support")
    type: ErrorKind
    error_code: Optional[str] = Field(None, description="More granular than type")
    message: str
    language: str = "en"
    transient: bool = Field(False, description="True when the request can safely be re-attempted")
