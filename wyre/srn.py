"""System Resource Names (SRNs).

An SRN is a typed reference string of the form ``type:identifier`` used by
the API to point at any entity or external address, e.g.
``account:AC_123``, ``ethereum:0xabc...`` or ``email:alice@example.com``.
Payment methods used for ACH pulls carry an extra suffix:
``paymentmethod:PA_123:ach``.

See https://docs.sendwyre.com/docs/srns
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from wyre.exceptions import MissingSrnType, SrnDecodeError, UnknownSrnVariant

ACH_SUFFIX = "ach"


class SrnKind(str, Enum):
    """The variant of an SRN. The value is the textual type tag."""

    ACCOUNT = "account"
    USER = "user"
    WALLET = "wallet"
    TRANSFER = "transfer"
    PAYMENT_METHOD = "paymentmethod"
    # Same tag as PAYMENT_METHOD, told apart by the ":ach" suffix
    ACH_PAYMENT_METHOD = "paymentmethod:ach"
    EMAIL = "email"
    CELLPHONE = "cellphone"
    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    AVALANCHE = "avalanche"
    STELLAR = "stellar"
    ALGORAND = "algorand"
    MATIC = "matic"
    FLOW = "flow"
    LOOPRING = "loopring"

    @property
    def tag(self) -> str:
        """The type segment written before the first colon."""
        return self.value.split(":", 1)[0]


_KINDS_BY_TAG: dict[str, SrnKind] = {
    kind.value: kind for kind in SrnKind if kind is not SrnKind.ACH_PAYMENT_METHOD
}

VALID_TAGS: list[str] = sorted(_KINDS_BY_TAG)


@dataclass(frozen=True)
class SystemResourceName:
    """A parsed SRN: a kind plus an opaque identifier."""

    kind: SrnKind
    identifier: str

    @classmethod
    def parse(cls, text: str) -> "SystemResourceName":
        """Parse ``type:identifier[:suffix]``.

        Raises:
            MissingSrnType: the input is empty or has no colon
            UnknownSrnVariant: the type segment is not recognized
            SrnDecodeError: the identifier is empty or the suffix is not allowed
        """
        if ":" not in text:
            raise MissingSrnType(text)

        segments = text.split(":", 2)
        tag, identifier = segments[0], segments[1]
        suffix = segments[2] if len(segments) == 3 else None

        if not tag:
            raise MissingSrnType(text)

        kind = _KINDS_BY_TAG.get(tag)
        if kind is None:
            raise UnknownSrnVariant(tag, VALID_TAGS, text)
        if not identifier:
            raise SrnDecodeError(f"missing identifier in SRN {text!r}", text)

        if suffix is None:
            return cls(kind, identifier)
        if kind is SrnKind.PAYMENT_METHOD and suffix == ACH_SUFFIX:
            return cls(SrnKind.ACH_PAYMENT_METHOD, identifier)
        raise SrnDecodeError(f"unexpected suffix {suffix!r} for SRN type {tag!r}", text)

    def format(self) -> str:
        """Render the canonical textual form."""
        if self.kind is SrnKind.ACH_PAYMENT_METHOD:
            return f"{self.kind.tag}:{self.identifier}:{ACH_SUFFIX}"
        return f"{self.kind.tag}:{self.identifier}"

    def __str__(self) -> str:
        return self.format()

    # Convenience constructors, one per kind

    @classmethod
    def account(cls, identifier: str) -> "SystemResourceName":
        return cls(SrnKind.ACCOUNT, identifier)

    @classmethod
    def user(cls, identifier: str) -> "SystemResourceName":
        return cls(SrnKind.USER, identifier)

    @classmethod
    def wallet(cls, identifier: str) -> "SystemResourceName":
        return cls(SrnKind.WALLET, identifier)

    @classmethod
    def transfer(cls, identifier: str) -> "SystemResourceName":
        return cls(SrnKind.TRANSFER, identifier)

    @classmethod
    def payment_method(cls, identifier: str) -> "SystemResourceName":
        return cls(SrnKind.PAYMENT_METHOD, identifier)

    @classmethod
    def ach_payment_method(cls, identifier: str) -> "SystemResourceName":
        return cls(SrnKind.ACH_PAYMENT_METHOD, identifier)

    @classmethod
    def email(cls, address: str) -> "SystemResourceName":
        return cls(SrnKind.EMAIL, address)

    @classmethod
    def cellphone(cls, number: str) -> "SystemResourceName":
        return cls(SrnKind.CELLPHONE, number)

    @classmethod
    def bitcoin(cls, address: str) -> "SystemResourceName":
        return cls(SrnKind.BITCOIN, address)

    @classmethod
    def ethereum(cls, address: str) -> "SystemResourceName":
        return cls(SrnKind.ETHEREUM, address)

    @classmethod
    def avalanche(cls, address: str) -> "SystemResourceName":
        return cls(SrnKind.AVALANCHE, address)

    @classmethod
    def stellar(cls, address: str) -> "SystemResourceName":
        return cls(SrnKind.STELLAR, address)

    @classmethod
    def algorand(cls, address: str) -> "SystemResourceName":
        return cls(SrnKind.ALGORAND, address)

    @classmethod
    def matic(cls, address: str) -> "SystemResourceName":
        return cls(SrnKind.MATIC, address)

    @classmethod
    def flow(cls, address: str) -> "SystemResourceName":
        return cls(SrnKind.FLOW, address)

    @classmethod
    def loopring(cls, address: str) -> "SystemResourceName":
        return cls(SrnKind.LOOPRING, address)


def _validate_srn(value: Any) -> SystemResourceName:
    if isinstance(value, SystemResourceName):
        return value
    if not isinstance(value, str):
        raise ValueError(f"SRN must be a string, got {type(value).__name__}")
    return SystemResourceName.parse(value)


# Field type for models: decodes from and encodes to the textual form
Srn = Annotated[
    SystemResourceName,
    PlainValidator(_validate_srn),
    PlainSerializer(lambda srn: srn.format(), return_type=str),
]
