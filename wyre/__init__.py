"""Wyre SDK - typed Python client for the Wyre payments API."""

from wyre.client import WyreClient
from wyre.config import ClientConfig, Environment, WyreSettings, load_config
from wyre.exceptions import (
    AccessDenied,
    AccountLocked,
    ConfigErrorKind,
    ConfigurationError,
    CustomerSupportRequired,
    EnvironmentParseError,
    FieldRequired,
    InsufficientFunds,
    InvalidValue,
    LockedOut,
    MFARequired,
    MissingSrnType,
    NotFound,
    RateLimitExceeded,
    RequestValidationError,
    ResponseDecodeError,
    SrnDecodeError,
    TransferFailed,
    TransportError,
    UnknownServerError,
    UnknownSrnVariant,
    UnrecognizedFieldType,
    WyreAPIError,
    WyreError,
    is_retryable,
)
from wyre.srn import Srn, SrnKind, SystemResourceName
from wyre.types.account import (
    Account,
    AccountStatus,
    AccountType,
    CreateAccount,
    DocumentSubType,
    DocumentType,
    MasterAccount,
    MasterAccountProfile,
    UpdateAccount,
    UploadDocument,
)
from wyre.types.common import Address, Amount, Currency, CurrencyCode, OtherCurrency
from wyre.types.errors import ApiError, ApiErrorKind, UnrecognizedErrorKind
from wyre.types.payment_method import (
    AchPaymentMethodCountry,
    CreateAchPaymentMethod,
    PaymentMethod,
    PaymentMethodList,
    PaymentMethodStatus,
    PaymentMethodType,
)
from wyre.types.profile import (
    AddressValue,
    CellphoneValue,
    CreateProfileField,
    DateValue,
    DocumentValue,
    EmailValue,
    PaymentMethodValue,
    ProfileField,
    ProfileFieldId,
    ProfileFieldStatus,
    ProfileFieldType,
    ProfileFieldValue,
    StringValue,
)
from wyre.types.transfer import CreateTransfer, Transfer, TransferStatus
from wyre.types.user import (
    KycOnboardingUrl,
    ModifyUser,
    ModifyUserFields,
    UploadUserDocument,
    User,
    UserField,
    UserFieldId,
    UserFields,
    UserFieldStatus,
    UserScope,
    UserStatus,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "WyreClient",
    # Configuration
    "ClientConfig",
    "Environment",
    "WyreSettings",
    "load_config",
    # Exceptions
    "WyreError",
    "WyreAPIError",
    "RequestValidationError",
    "InvalidValue",
    "FieldRequired",
    "InsufficientFunds",
    "AccessDenied",
    "TransferFailed",
    "MFARequired",
    "CustomerSupportRequired",
    "NotFound",
    "RateLimitExceeded",
    "AccountLocked",
    "LockedOut",
    "UnknownServerError",
    "TransportError",
    "ResponseDecodeError",
    "SrnDecodeError",
    "MissingSrnType",
    "UnknownSrnVariant",
    "UnrecognizedFieldType",
    "ConfigErrorKind",
    "ConfigurationError",
    "EnvironmentParseError",
    "is_retryable",
    # SRN
    "SystemResourceName",
    "SrnKind",
    "Srn",
    # Types
    "Address",
    "Amount",
    "Currency",
    "CurrencyCode",
    "OtherCurrency",
    "ApiError",
    "ApiErrorKind",
    "UnrecognizedErrorKind",
    "Account",
    "AccountStatus",
    "AccountType",
    "CreateAccount",
    "UpdateAccount",
    "UploadDocument",
    "DocumentType",
    "DocumentSubType",
    "MasterAccount",
    "MasterAccountProfile",
    "ProfileField",
    "CreateProfileField",
    "ProfileFieldId",
    "ProfileFieldStatus",
    "ProfileFieldType",
    "ProfileFieldValue",
    "StringValue",
    "CellphoneValue",
    "EmailValue",
    "AddressValue",
    "DateValue",
    "DocumentValue",
    "PaymentMethodValue",
    "PaymentMethod",
    "PaymentMethodList",
    "PaymentMethodStatus",
    "PaymentMethodType",
    "AchPaymentMethodCountry",
    "CreateAchPaymentMethod",
    "Transfer",
    "CreateTransfer",
    "TransferStatus",
    "User",
    "UserStatus",
    "UserField",
    "UserFieldId",
    "UserFields",
    "UserFieldStatus",
    "UserScope",
    "ModifyUser",
    "ModifyUserFields",
    "KycOnboardingUrl",
    "UploadUserDocument",
]
