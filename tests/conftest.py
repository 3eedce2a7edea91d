"""Test configuration and fixtures for SDK tests."""

from typing import Any, Callable

import httpx
import pytest

from wyre import Environment, WyreClient


@pytest.fixture
def api_key() -> str:
    """Return a test API key."""
    return "AK-TEST-KEY-1234"


@pytest.fixture
def api_secret() -> str:
    """Return a test API secret."""
    return "SK-TEST-SECRET-5678"


@pytest.fixture
def make_client(api_key: str, api_secret: str) -> Callable[..., WyreClient]:
    """Return a factory building a client whose requests go to a handler."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> WyreClient:
        return WyreClient(
            api_key=api_key,
            api_secret=api_secret,
            environment=Environment.TEST,
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def address_payload() -> dict[str, Any]:
    return {
        "street1": "123 Sesame St",
        "street2": None,
        "city": "New York City",
        "state": "NY",
        "postalCode": "10001",
        "country": "US",
    }


@pytest.fixture
def account_payload(address_payload: dict[str, Any]) -> dict[str, Any]:
    """Return an account as sent by the API."""
    return {
        "id": "AC_WYUXH6EWBYR",
        "status": "OPEN",
        "type": "INDIVIDUAL",
        "country": "US",
        "createdAt": 1577836800000,
        "updatedAt": 1577836900000,
        "depositAddresses": {
            "ETH": "0x9a3a4b1cd5c2b8d2fd5e1e6a3fb9e3b5a1c2d3e4",
            "BTC": "14CriXWTRoJmQdBzdikw6tEmSuwxMozWWq",
        },
        "totalBalances": {"BTC": 0, "ETH": 0.0015},
        "availableBalances": {"BTC": 0, "ETH": 0.0015},
        "profileFields": [
            {
                "fieldId": "individualLegalName",
                "fieldType": "STRING",
                "value": "Alice Loyd",
                "note": None,
                "status": "PENDING",
            },
            {
                "fieldId": "individualResidenceAddress",
                "fieldType": "ADDRESS",
                "value": address_payload,
                "note": None,
                "status": "PENDING",
            },
            {
                "fieldId": "individualGovernmentId",
                "fieldType": "DOCUMENT",
                "value": [],
                "note": "Upload the front and back of your id",
                "status": "OPEN",
            },
            {
                "fieldId": "individualSourceOfFunds",
                "fieldType": "PAYMENT_METHOD",
                "value": None,
                "note": None,
                "updatedT": 1577836900000,
                "status": "OPEN",
            },
        ],
    }


@pytest.fixture
def payment_method_payload() -> dict[str, Any]:
    """Return a payment method as sent by the API."""
    return {
        "id": "PA_ABC123",
        "owner": "account:AC_WYUXH6EWBYR",
        "createdAt": 1577836800000,
        "name": "Plaid Checking 0000",
        "defaultCurrency": "USD",
        "status": "ACTIVE",
        "linkType": "LOCAL_TRANSFER",
        "beneficiaryType": "UNKNOWN",
        "supportsDeposits": True,
        "last4Digits": "0000",
        "brand": None,
        "countryCode": "US",
        "disabled": False,
        "supportsPayment": True,
        "chargeableCurrencies": ["USD"],
        "depositableCurrencies": ["USD"],
        "srn": "paymentmethod:PA_ABC123",
    }


@pytest.fixture
def transfer_payload() -> dict[str, Any]:
    """Return a transfer as sent by the API."""
    return {
        "id": "TF_VNQ8VAUAUY2",
        "owner": "account:AC_WYUXH6EWBYR",
        "source": "paymentmethod:PA_ABC123:ach",
        "sourceAmount": 20.5,
        "sourceCurrency": "USD",
        "dest": "ethereum:0xc12fae05cbe72a501540f260d6c49ddc6f9d9f4d",
        "destAmount": 20.12,
        "destCurrency": "USDC",
        "status": "PENDING",
        "pendingSubStatus": None,
        "createdAt": 1577836800000,
        "completedAt": None,
        "expiresAt": 1577836830000,
        "exchangeRate": 0.9998,
        "fees": {"USD": 0.38, "USDC": 0},
        "totalFees": 0.38,
        "message": "test transfer",
        "customId": None,
    }


@pytest.fixture
def user_payload(address_payload: dict[str, Any]) -> dict[str, Any]:
    """Return a user as sent by the API."""
    return {
        "id": "US_ABC123",
        "status": "PENDING",
        "createdAt": 1577836800000,
        "depositAddresses": {"ETH": "0x9a3a4b1cd5c2b8d2fd5e1e6a3fb9e3b5a1c2d3e4"},
        "totalBalances": {"ETH": 0},
        "availableBalances": {"ETH": 0},
        "fields": {
            "firstName": {"value": "Alice", "status": "SUBMITTED", "error": None},
            "lastName": {"value": None, "status": "OPEN", "error": "Last name is required"},
            "residenceAddress": {"value": address_payload, "status": "SUBMITTED", "error": None},
        },
    }


@pytest.fixture
def error_payload() -> dict[str, Any]:
    """Return an API error body."""
    return {
        "exceptionId": "test-1bcd56",
        "type": "InsufficientFundsException",
        "errorCode": "transfer.insufficientFunds",
        "message": "Insufficient funds in USD",
        "language": "en",
        "transient": False,
    }
