"""Transfer and exchange resources.

See https://docs.sendwyre.com/docs/transfer-resources
"""

from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import Field, PlainSerializer, PlainValidator, model_validator

from wyre.exceptions import SrnDecodeError
from wyre.srn import Srn, SystemResourceName
from wyre.types.common import Amount, CurrencyCode, WyreModel


def _validate_destination(value: Any) -> Union[SystemResourceName, str]:
    if isinstance(value, SystemResourceName):
        return value
    if not isinstance(value, str):
        raise ValueError(f"destination must be a string, got {type(value).__name__}")
    try:
        return SystemResourceName.parse(value)
    except SrnDecodeError:
        # Email addresses and cellphone numbers may be given bare
        return value


# An SRN, or a bare email address or cellphone number
TransferDestination = Annotated[
    Union[SystemResourceName, str],
    PlainValidator(_validate_destination),
    PlainSerializer(str, return_type=str),
]


class TransferStatus(str, Enum):
    """Lifecycle of a transfer.

    A preview is a quote and never moves. Otherwise a transfer starts
    UNCONFIRMED and either gets confirmed (PENDING, then COMPLETED or
    REVERSED), EXPIRES after the server's 30 second confirmation window,
    or FAILS.
    """

    PREVIEW = "PREVIEW"
    UNCONFIRMED = "UNCONFIRMED"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    REVERSED = "REVERSED"
    EXPIRED = "EXPIRED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self not in (TransferStatus.UNCONFIRMED, TransferStatus.PENDING)


class CreateTransfer(WyreModel):
    """Create Transfer request body.

    See https://docs.sendwyre.com/docs/create-transfer#parameters
    """

    source: Srn = Field(..., description="Where the funds are taken from")
    source_currency: CurrencyCode
    source_amount: Optional[Amount] = Field(
        None, description="Amount to withdraw, in source_currency. Exclusive with dest_amount."
    )
    dest: TransferDestination = Field(
        ..., description="Account, email, cellphone or blockchain address to send to"
    )
    dest_currency: Optional[CurrencyCode] = Field(
        None, description="Currency to deposit; defaults to source_currency (no exchange)"
    )
    dest_amount: Optional[Amount] = Field(
        None, description="Amount to deposit, in dest_currency. Exclusive with source_amount."
    )
    message: Optional[str] = None
    notify_url: Optional[str] = Field(None, description="Wyre POSTs status callbacks here")
    auto_confirm: Optional[bool] = None
    custom_id: Optional[str] = None
    amount_includes_fees: Optional[bool] = None
    preview: Optional[bool] = Field(None, description="Quote only, do not execute")
    mute_messages: Optional[bool] = None

    @model_validator(mode="after")
    def _one_amount(self) -> "CreateTransfer":
        if self.source_amount is not None and self.dest_amount is not None:
            raise ValueError("Provide source_amount OR dest_amount, not both")
        return self


class Transfer(WyreModel):
    """A transfer as reported by the API."""

    id: str
    owner: Srn
    source: Srn
    source_amount: Amount
    source_currency: CurrencyCode
    dest: Srn
    dest_amount: Amount
    dest_currency: CurrencyCode
    status: TransferStatus
    pending_sub_status: Optional[str] = None
    failure_reason: Optional[str] = None
    created_at: Optional[int] = None
    completed_at: Optional[int] = None
    updated_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    expires_at: Optional[int] = None
    exchange_rate: Optional[Amount] = None
    fees: dict[CurrencyCode, Amount] = Field(default_factory=dict)
    total_fees: Amount
    message: Optional[str] = None
    custom_id: Optional[str] = None
