"""Account KYC profile fields.

A profile field pairs a field id with a value whose shape is announced by a
``fieldType`` discriminator sitting next to it on the wire::

    {"fieldId": "individualResidenceAddress",
     "fieldType": "ADDRESS",
     "value": {"street1": "...", "city": "..."},
     "note": null,
     "status": "OPEN"}

See https://docs.sendwyre.com/docs/account-resource#account-fields
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, field_validator, model_serializer, model_validator

from wyre.exceptions import UnrecognizedFieldType
from wyre.types.common import Address, WyreModel


class ProfileFieldType(str, Enum):
    """Discriminator tokens for profile field values."""

    STRING = "STRING"
    CELLPHONE = "CELLPHONE"
    EMAIL = "EMAIL"
    ADDRESS = "ADDRESS"
    DATE = "DATE"
    DOCUMENT = "DOCUMENT"
    PAYMENT_METHOD = "PAYMENT_METHOD"


class StringValue(WyreModel):
    """A basic string."""

    field_type: Literal["STRING"] = "STRING"
    value: Optional[str] = None


class CellphoneValue(WyreModel):
    """A full cellphone number including country code (e.g. ``+15554445555``)."""

    field_type: Literal["CELLPHONE"] = "CELLPHONE"
    value: Optional[str] = None


class EmailValue(WyreModel):
    """A correctly formatted email address."""

    field_type: Literal["EMAIL"] = "EMAIL"
    value: Optional[str] = None


class AddressValue(WyreModel):
    """An address object."""

    field_type: Literal["ADDRESS"] = "ADDRESS"
    value: Optional[Address] = None


class DateValue(WyreModel):
    """A particular day formatted ``YYYY-MM-DD``."""

    field_type: Literal["DATE"] = "DATE"
    value: Optional[str] = None


class DocumentValue(WyreModel):
    """Ids of the documents uploaded for the field.

    Documents are uploaded with ``WyreClient.upload_document``. Invalid
    documents are deleted during review; once the field is ``APPROVED``
    only the approved ids remain.
    """

    field_type: Literal["DOCUMENT"] = "DOCUMENT"
    value: list[str] = Field(default_factory=list)

    @field_validator("value", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class PaymentMethodValue(WyreModel):
    """The id of a payment method owned by the account holder."""

    field_type: Literal["PAYMENT_METHOD"] = "PAYMENT_METHOD"
    value: Optional[str] = None


ProfileFieldValue = Annotated[
    Union[
        StringValue,
        CellphoneValue,
        EmailValue,
        AddressValue,
        DateValue,
        DocumentValue,
        PaymentMethodValue,
    ],
    Field(discriminator="field_type"),
]


def check_field_type(field_type: Any) -> ProfileFieldType:
    """Resolve a discriminator token, refusing anything unknown."""
    try:
        return ProfileFieldType(field_type)
    except ValueError:
        raise UnrecognizedFieldType(field_type, [t.value for t in ProfileFieldType]) from None


class ProfileFieldId(str, Enum):
    """The specific datapoint a profile field holds.

    See https://docs.sendwyre.com/docs/account-resource#field-ids
    """

    INDIVIDUAL_LEGAL_NAME = "individualLegalName"
    INDIVIDUAL_CELLPHONE_NUMBER = "individualCellphoneNumber"
    INDIVIDUAL_EMAIL = "individualEmail"
    INDIVIDUAL_RESIDENCE_ADDRESS = "individualResidenceAddress"
    # A scan or photo of a drivers license or passport
    INDIVIDUAL_GOVERNMENT_ID = "individualGovernmentId"
    INDIVIDUAL_DATE_OF_BIRTH = "individualDateOfBirth"
    INDIVIDUAL_SSN = "individualSsn"
    # A payment method the account holder owns
    INDIVIDUAL_SOURCE_OF_FUNDS = "individualSourceOfFunds"
    # A utility bill or bank statement. Starts PENDING while the source of
    # funds is used to verify the address; goes OPEN if that fails.
    INDIVIDUAL_PROOF_OF_ADDRESS = "individualProofOfAddress"
    # Requested by compliance to verify a payment method
    INDIVIDUAL_ACH_AUTHORIZATION_FORM = "individualAchAuthorizationForm"

    @property
    def expected_type(self) -> ProfileFieldType:
        """The value type the API requires for this field."""
        return _EXPECTED_TYPES[self]

    def __str__(self) -> str:
        return self.value


_EXPECTED_TYPES: dict[ProfileFieldId, ProfileFieldType] = {
    ProfileFieldId.INDIVIDUAL_LEGAL_NAME: ProfileFieldType.STRING,
    ProfileFieldId.INDIVIDUAL_CELLPHONE_NUMBER: ProfileFieldType.CELLPHONE,
    ProfileFieldId.INDIVIDUAL_EMAIL: ProfileFieldType.EMAIL,
    ProfileFieldId.INDIVIDUAL_RESIDENCE_ADDRESS: ProfileFieldType.ADDRESS,
    ProfileFieldId.INDIVIDUAL_GOVERNMENT_ID: ProfileFieldType.DOCUMENT,
    ProfileFieldId.INDIVIDUAL_DATE_OF_BIRTH: ProfileFieldType.DATE,
    ProfileFieldId.INDIVIDUAL_SSN: ProfileFieldType.STRING,
    ProfileFieldId.INDIVIDUAL_SOURCE_OF_FUNDS: ProfileFieldType.PAYMENT_METHOD,
    ProfileFieldId.INDIVIDUAL_PROOF_OF_ADDRESS: ProfileFieldType.DOCUMENT,
    ProfileFieldId.INDIVIDUAL_ACH_AUTHORIZATION_FORM: ProfileFieldType.DOCUMENT,
}


class ProfileFieldStatus(str, Enum):
    """Verification status of a single profile field.

    OPEN -> PENDING -> APPROVED, driven by the server.
    """

    # Waiting on the account holder; also the state after a failed verification
    OPEN = "OPEN"
    # Submitted and waiting on review
    PENDING = "PENDING"
    # Reviewed and accepted
    APPROVED = "APPROVED"

    @property
    def is_terminal(self) -> bool:
        return self is ProfileFieldStatus.APPROVED


class _FlattenedField(WyreModel):
    """Moves ``fieldType``/``value`` between the flat wire form and ``value``."""

    field_id: ProfileFieldId
    value: ProfileFieldValue

    @model_validator(mode="before")
    @classmethod
    def _nest_value(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        tag_key = next((k for k in ("fieldType", "field_type") if k in data), None)
        if tag_key is None:
            return data
        data = dict(data)
        field_type = check_field_type(data.pop(tag_key))
        data["value"] = {"fieldType": field_type.value, "value": data.get("value")}
        return data

    @model_serializer(mode="wrap")
    def _flatten_value(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        nested = data.pop("value", None) or {}
        data.update(nested)
        # An empty value is sent as null, never left out
        data.setdefault("value", None)
        return data

    @property
    def field_type(self) -> ProfileFieldType:
        return ProfileFieldType(self.value.field_type)


class CreateProfileField(_FlattenedField):
    """A field submitted when creating or updating an account."""

    @model_validator(mode="after")
    def _value_matches_field(self) -> "CreateProfileField":
        expected = self.field_id.expected_type
        if self.field_type is not expected:
            raise ValueError(
                f"{self.field_id.value} requires a {expected.value} value, got {self.field_type.value}"
            )
        return self


class ProfileField(_FlattenedField):
    """A profile field as reported by the API."""

    note: Optional[str] = Field(None, description="A message to the account holder about the field")
    updated_t: Optional[int] = Field(None, description="When the field was last updated (ms)")
    status: ProfileFieldStatus
