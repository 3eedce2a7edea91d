"""Shared building blocks: base model, addresses, amounts and currencies."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator
from pydantic.alias_generators import to_camel


class WyreModel(BaseModel):
    """Base class for all API models.

    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# A financial amount (the value is not scaled). Sent as a fixed-point
# string so no digits are lost to float conversion and no exponent appears.
Amount = Annotated[
    Decimal,
    PlainSerializer(lambda value: format(value, "f"), return_type=str, when_used="json"),
]


class Address(WyreModel):
    """A postal address."""

    street1: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None  # two uppercase letters, e.g. CA
    postal_code: Optional[str] = None
    country: Optional[str] = None  # alpha-2 country code


@dataclass(frozen=True)
class Unrecognized:
    """A token outside a closed enumeration, kept verbatim."""

    value: str

    def __str__(self) -> str:
        return self.value


def open_enum(
    enum_cls: type[Enum],
    fallback_cls: type[Unrecognized],
) -> Callable[[Any], Any]:
    """Build a validator resolving a token to an enum member or the fallback."""

    def resolve(value: Any) -> Any:
        if isinstance(value, (enum_cls, fallback_cls)):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected a string token, got {type(value).__name__}")
        try:
            return enum_cls(value)
        except ValueError:
            return fallback_cls(value)

    return resolve


def _token(value: Union[Enum, Unrecognized]) -> str:
    return value.value


class Currency(str, Enum):
    """See https://docs.sendwyre.com/docs/supported-currencies-1"""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    AUD = "AUD"
    CAD = "CAD"
    NZD = "NZD"
    ARS = "ARS"
    BRL = "BRL"
    CHF = "CHF"
    CLP = "CLP"
    COP = "COP"
    CZK = "CZK"
    DKK = "DKK"
    HKD = "HKD"
    ILS = "ILS"
    INR = "INR"
    ISK = "ISK"
    JPY = "JPY"
    KRW = "KRW"
    MXN = "MXN"
    MYR = "MYR"
    NOK = "NOK"
    PHP = "PHP"
    PLN = "PLN"
    SEK = "SEK"
    SGD = "SGD"
    THB = "THB"
    VND = "VND"
    ZAR = "ZAR"

    BTC = "BTC"
    ETH = "ETH"
    XLM = "XLM"
    SUSDC = "sUSDC"  # Stellar USDC
    AVAX = "AVAX"
    DAI = "DAI"
    PDAI = "pDAI"  # Palm DAI
    USDC = "USDC"
    MUSDC = "mUSDC"  # Matic USDC
    LBTC = "L-BTC"  # Liquid BTC
    USDT = "USDT"
    BUSD = "BUSD"
    GUSD = "GUSD"
    PAX = "PAX"
    USDS = "USDS"
    AAVE = "AAVE"
    COMP = "COMP"
    LINK = "LINK"
    WBTC = "WBTC"
    BAT = "BAT"
    CRV = "CRV"
    MKR = "MKR"
    SNX = "SNX"
    UMA = "UMA"
    UNI = "UNI"
    YFI = "YFI"
    GYEN = "GYEN"
    ZUSD = "ZUSD"
    MATIC = "MATIC"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OtherCurrency(Unrecognized):
    """A currency code added server-side that this library does not know yet."""

    def __post_init__(self) -> None:
        try:
            known = Currency(self.value)
        except ValueError:
            return
        raise ValueError(f"{self.value} is a known currency, use Currency.{known.name}")


parse_currency = open_enum(Currency, OtherCurrency)

CurrencyCode = Annotated[
    Union[Currency, OtherCurrency],
    PlainValidator(parse_currency),
    PlainSerializer(_token, return_type=str),
]
