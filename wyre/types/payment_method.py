"""Payment method resources.

See https://docs.sendwyre.com/docs/payment-method-overview
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from wyre.srn import Srn, SystemResourceName
from wyre.types.common import CurrencyCode, WyreModel


class PaymentMethodStatus(str, Enum):
    """PENDING -> AWAITING_FOLLOWUP | ACTIVE | REJECTED."""

    # Under review on Wyre's side, no user action required
    PENDING = "PENDING"
    # Needs more information from the user, e.g. a bank statement for wires
    AWAITING_FOLLOWUP = "AWAITING_FOLLOWUP"
    ACTIVE = "ACTIVE"
    REJECTED = "REJECTED"

    @property
    def is_terminal(self) -> bool:
        return self in (PaymentMethodStatus.ACTIVE, PaymentMethodStatus.REJECTED)


class PaymentMethodType(str, Enum):
    # LinkType INTERNATIONAL_TRANSFER
    WIRE_TRANSFER = "WIRE_TRANSFER"
    # ACH in the US. LinkType LOCAL_TRANSFER
    LOCAL_TRANSFER = "LOCAL_TRANSFER"


class AchPaymentMethodCountry(str, Enum):
    US = "US"


class CreateAchPaymentMethod(WyreModel):
    """ACH payment method backed by a Plaid processor token.

    See https://docs.sendwyre.com/docs/ach-create-payment-method-processor-token-model
    """

    plaid_processor_token: str = Field(..., description="Token from Plaid /processor/token/create")
    payment_method_type: PaymentMethodType = PaymentMethodType.LOCAL_TRANSFER
    country: AchPaymentMethodCountry = AchPaymentMethodCountry.US


class PaymentMethod(WyreModel):
    """A bank account or card linked to an account."""

    id: str
    owner: Srn
    created_at: int
    name: str
    default_currency: CurrencyCode
    status: PaymentMethodStatus
    link_type: str
    beneficiary_type: str
    supports_deposits: Optional[bool] = None
    last4_digits: str
    brand: Optional[str] = None
    country_code: str
    disabled: bool
    supports_payment: bool
    chargeable_currencies: list[CurrencyCode] = Field(default_factory=list)
    depositable_currencies: list[CurrencyCode] = Field(default_factory=list)
    srn: Srn

    @property
    def ach_srn(self) -> SystemResourceName:
        """SRN to use as a transfer source for ACH pulls."""
        return SystemResourceName.ach_payment_method(self.id)


class PaymentMethodList(WyreModel):
    """One page of payment methods."""

    data: list[PaymentMethod]
    records_total: int
    position: int
    records_filtered: int
