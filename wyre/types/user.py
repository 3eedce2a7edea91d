"""User resources (the Users KYC API).

Unlike account profile fields, user field values carry no type
discriminator: an object is an address, a list holds document ids and
anything else is a string.
"""

from enum import Enum
from typing import Annotated, Optional, Union

from pydantic import Field

from wyre.types.account import DocumentSubType, DocumentType
from wyre.types.common import Address, Amount, CurrencyCode, WyreModel


class UserStatus(str, Enum):
    """OPEN -> PENDING -> APPROVED, CLOSED reachable from any state.

    APPROVED does not imply every field is SUBMITTED; check both.
    """

    OPEN = "OPEN"
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    CLOSED = "CLOSED"

    @property
    def is_terminal(self) -> bool:
        return self in (UserStatus.APPROVED, UserStatus.CLOSED)


class UserFieldStatus(str, Enum):
    """OPEN -> SUBMITTED. May fall back to OPEN if verification later fails."""

    OPEN = "OPEN"
    SUBMITTED = "SUBMITTED"


class UserFieldId(str, Enum):
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    RESIDENCE_ADDRESS = "residenceAddress"
    DATE_OF_BIRTH = "dateOfBirth"
    CELLPHONE_NUMBER = "cellphoneNumber"
    EMAIL_ADDRESS = "emailAddress"
    GOVERNMENT_ID = "governmentId"

    def __str__(self) -> str:
        return self.value


class UserScope(str, Enum):
    # Required for all transfers
    TRANSFER = "TRANSFER"
    # Attach bank accounts to users
    ACH = "ACH"
    # Higher limits card processing
    DEBIT_CARD_L2 = "DEBIT_CARD_L2"


# Order matters: an object must be tried as an address before a string.
UserFieldValue = Annotated[Union[Address, list[str], str], Field(union_mode="left_to_right")]


class UserField(WyreModel):
    """Value and verification status of one user field."""

    value: Optional[UserFieldValue] = None
    status: UserFieldStatus
    error: Optional[str] = Field(None, description="Correctable problem, set with an OPEN status")


class UserFields(WyreModel):
    """Status of each submitted user field. Unknown fields are ignored."""

    first_name: Optional[UserField] = None
    last_name: Optional[UserField] = None
    residence_address: Optional[UserField] = None
    date_of_birth: Optional[UserField] = None
    cellphone_number: Optional[UserField] = None
    email_address: Optional[UserField] = None
    government_id: Optional[UserField] = None

    def get(self, field_id: UserFieldId) -> Optional[UserField]:
        """Look up a field by its wire id."""
        for name, info in type(self).model_fields.items():
            if info.alias == field_id.value:
                return getattr(self, name)
        return None


class User(WyreModel):
    """A user and the state of their KYC fields."""

    id: str
    status: UserStatus
    created_at: int
    deposit_addresses: dict[CurrencyCode, str] = Field(default_factory=dict)
    total_balances: dict[CurrencyCode, Amount] = Field(default_factory=dict)
    available_balances: dict[CurrencyCode, Amount] = Field(default_factory=dict)
    fields: UserFields = Field(default_factory=UserFields)


class ModifyUserFields(WyreModel):
    """Field values to submit; unset fields are left untouched."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    residence_address: Optional[Address] = None
    date_of_birth: Optional[str] = None
    cellphone_number: Optional[str] = None
    email_address: Optional[str] = None


class ModifyUser(WyreModel):
    """Body of the create and update user calls."""

    blockchains: list[str] = Field(
        default_factory=list, description="Blockchains to connect: BTC, ETH or ALL"
    )
    immediate: bool = Field(
        False, description="Return immediately instead of waiting up to 5s; always yields PENDING"
    )
    fields: ModifyUserFields = Field(default_factory=ModifyUserFields)
    scopes: list[UserScope] = Field(default_factory=list)


class KycOnboardingUrl(WyreModel):
    """Hosted KYC page for a user."""

    url: str


class UploadUserDocument(WyreModel):
    """A document for a user field, e.g. a government id."""

    field_id: UserFieldId = UserFieldId.GOVERNMENT_ID
    document: bytes
    content_type: str
    document_type: Optional[DocumentType] = None
    document_sub_type: Optional[DocumentSubType] = None
