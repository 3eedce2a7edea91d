"""Account resources.

See https://docs.sendwyre.com/docs/account-resource
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from wyre.srn import Srn
from wyre.types.common import Address, Amount, CurrencyCode, WyreModel
from wyre.types.payment_method import PaymentMethod
from wyre.types.profile import CreateProfileField, ProfileField, ProfileFieldId, ProfileFieldType


class AccountStatus(str, Enum):
    """Lifecycle of an account.

    OPEN -> PENDING -> APPROVED, with CLOSED reachable from any non-terminal
    state.
    """

    # Waiting on the account holder, initially or after a failed verification
    OPEN = "OPEN"
    # Fully submitted, waiting on review. Cannot transact yet.
    PENDING = "PENDING"
    # Reviewed and approved to transact
    APPROVED = "APPROVED"
    # Closed, may not transact
    CLOSED = "CLOSED"

    @property
    def is_terminal(self) -> bool:
        return self in (AccountStatus.APPROVED, AccountStatus.CLOSED)


class AccountType(str, Enum):
    """Kind of account holder. Only INDIVIDUAL is supported through the API."""

    INDIVIDUAL = "INDIVIDUAL"
    BUSINESS = "BUSINESS"


class DocumentType(str, Enum):
    """Government id document kinds accepted by ``individualGovernmentId``."""

    GOVT_ID = "GOVT_ID"
    DRIVING_LICENSE = "DRIVING_LICENSE"
    PASSPORT_CARD = "PASSPORT_CARD"
    PASSPORT = "PASSPORT"


class DocumentSubType(str, Enum):
    """Side of a two-sided document. GOVT_ID, DRIVING_LICENSE and
    PASSPORT_CARD need both FRONT and BACK."""

    FRONT = "FRONT"
    BACK = "BACK"


class MasterAccountProfile(WyreModel):
    """Profile of the master account."""

    first_name: str
    last_name: str
    language: str
    address: Address
    business_account: bool
    notify_cellphone: bool
    onboarding_dashboard_completed: bool
    display_currency: str
    type: str
    vertical: str
    country: str


class MasterAccount(WyreModel):
    """The account the API credentials belong to."""

    id: str
    srn: Srn
    created_at: int
    updated_at: Optional[int] = None
    deleted_at: Optional[int] = None
    disabled_at: Optional[int] = None
    locked_at: Optional[int] = None
    under_review_at: Optional[int] = None
    in_review_at: Optional[int] = None
    compliance_approved_at: Optional[int] = None
    status: AccountStatus
    profile: MasterAccountProfile
    payment_methods: list[PaymentMethod] = Field(default_factory=list)
    deposit_addresses: dict[CurrencyCode, str] = Field(default_factory=dict)
    pusher_channel: str
    email: str
    verified: bool
    type: str


class Account(WyreModel):
    """A (sub)account and its KYC profile."""

    id: str
    status: AccountStatus
    type: AccountType
    country: str
    created_at: int
    updated_at: int
    deposit_addresses: dict[CurrencyCode, str] = Field(default_factory=dict)
    total_balances: dict[CurrencyCode, Amount] = Field(default_factory=dict)
    available_balances: dict[CurrencyCode, Amount] = Field(default_factory=dict)
    profile_fields: list[ProfileField] = Field(default_factory=list)

    def profile_field(self, field_id: ProfileFieldId) -> Optional[ProfileField]:
        """Find a profile field by id."""
        for field in self.profile_fields:
            if field.field_id is field_id:
                return field
        return None


class CreateAccount(WyreModel):
    """Create Account request body.

    See https://docs.sendwyre.com/docs/create-account#parameters
    """

    type: AccountType = AccountType.INDIVIDUAL
    country: str = Field(..., description="Country of residence (only US is supported)")
    profile_fields: list[CreateProfileField] = Field(default_factory=list)
    referrer_account_id: Optional[str] = Field(
        None, description="Account that referred a new noncustodial account"
    )
    subaccount: Optional[bool] = Field(
        None, description="Custodial subaccount owned by the caller (server default: true)"
    )
    disable_email: Optional[bool] = Field(
        None, description="Prevent all outbound emails to the account (server default: false)"
    )


class UpdateAccount(WyreModel):
    """Update Account request body."""

    profile_fields: list[CreateProfileField]


class UploadDocument(WyreModel):
    """A document to attach to a DOCUMENT-typed profile field.

    Supported content types: application/pdf, image/jpeg, image/png,
    application/msword and
    application/vnd.openxmlformats-officedocument.wordprocessingml.document.
    The server rejects files over 7.75MB.
    """

    field_id: ProfileFieldId
    document: bytes
    content_type: str
    document_type: Optional[DocumentType] = None
    document_sub_type: Optional[DocumentSubType] = None

    @field_validator("field_id")
    @classmethod
    def _document_field(cls, field_id: ProfileFieldId) -> ProfileFieldId:
        if field_id.expected_type is not ProfileFieldType.DOCUMENT:
            raise ValueError(f"{field_id.value} does not accept document uploads")
        return field_id
