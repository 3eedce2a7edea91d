"""Tests for API models: currencies, amounts, accounts, transfers and users."""

from decimal import Decimal

import pytest
from pydantic import TypeAdapter, ValidationError

from wyre.srn import SrnKind, SystemResourceName
from wyre.types.account import (
    Account,
    AccountStatus,
    CreateAccount,
    DocumentType,
    UploadDocument,
)
from wyre.types.common import Address, Currency, CurrencyCode, OtherCurrency
from wyre.types.payment_method import CreateAchPaymentMethod, PaymentMethod
from wyre.types.profile import (
    AddressValue,
    CreateProfileField,
    DocumentValue,
    PaymentMethodValue,
    ProfileFieldId,
    StringValue,
)
from wyre.types.transfer import CreateTransfer, Transfer, TransferStatus
from wyre.types.user import (
    ModifyUser,
    ModifyUserFields,
    User,
    UserFieldId,
    UserFieldStatus,
    UserScope,
)

currency_adapter = TypeAdapter(CurrencyCode)


class TestCurrency:
    """Tests for the open currency enumeration."""

    @pytest.mark.parametrize(
        "token,member",
        [
            ("USD", Currency.USD),
            ("sUSDC", Currency.SUSDC),
            ("pDAI", Currency.PDAI),
            ("mUSDC", Currency.MUSDC),
            ("L-BTC", Currency.LBTC),
        ],
    )
    def test_known_tokens(self, token, member):
        assert currency_adapter.validate_python(token) is member
        assert currency_adapter.dump_python(member) == token

    def test_unknown_token_is_preserved(self):
        currency = currency_adapter.validate_python("DOGE")
        assert currency == OtherCurrency("DOGE")
        assert str(currency) == "DOGE"
        assert currency_adapter.dump_python(currency, mode="json") == "DOGE"

    def test_tokens_are_case_sensitive(self):
        assert currency_adapter.validate_python("usd") == OtherCurrency("usd")

    def test_other_currency_rejects_known_codes(self):
        with pytest.raises(ValueError, match="Currency.USD"):
            OtherCurrency("USD")

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError):
            currency_adapter.validate_python(840)


class TestAccount:
    """Tests for account models."""

    def test_decode_account(self, account_payload):
        account = Account.model_validate(account_payload)
        assert account.id == "AC_WYUXH6EWBYR"
        assert account.status is AccountStatus.OPEN
        assert not account.status.is_terminal
        assert account.deposit_addresses[Currency.BTC] == "14CriXWTRoJmQdBzdikw6tEmSuwxMozWWq"
        assert account.total_balances[Currency.ETH] == Decimal("0.0015")
        assert len(account.profile_fields) == 4

    def test_profile_field_lookup(self, account_payload):
        account = Account.model_validate(account_payload)

        address = account.profile_field(ProfileFieldId.INDIVIDUAL_RESIDENCE_ADDRESS)
        assert isinstance(address.value, AddressValue)
        assert address.value.value.postal_code == "10001"

        government_id = account.profile_field(ProfileFieldId.INDIVIDUAL_GOVERNMENT_ID)
        assert government_id.value == DocumentValue(value=[])
        assert government_id.note == "Upload the front and back of your id"

        source = account.profile_field(ProfileFieldId.INDIVIDUAL_SOURCE_OF_FUNDS)
        assert source.value == PaymentMethodValue(value=None)

        assert account.profile_field(ProfileFieldId.INDIVIDUAL_SSN) is None

    def test_create_account_to_wire(self):
        body = CreateAccount(
            country="US",
            subaccount=True,
            profile_fields=[
                CreateProfileField(
                    field_id=ProfileFieldId.INDIVIDUAL_LEGAL_NAME,
                    value=StringValue(value="Alice Loyd"),
                ),
            ],
        )
        assert body.to_wire() == {
            "type": "INDIVIDUAL",
            "country": "US",
            "subaccount": True,
            "profileFields": [
                {"fieldId": "individualLegalName", "fieldType": "STRING", "value": "Alice Loyd"},
            ],
        }

    def test_upload_document_requires_document_field(self):
        UploadDocument(
            field_id=ProfileFieldId.INDIVIDUAL_PROOF_OF_ADDRESS,
            document=b"%PDF-1.4",
            content_type="application/pdf",
        )
        with pytest.raises(ValidationError, match="does not accept document uploads"):
            UploadDocument(
                field_id=ProfileFieldId.INDIVIDUAL_EMAIL,
                document=b"%PDF-1.4",
                content_type="application/pdf",
                document_type=DocumentType.PASSPORT,
            )


class TestPaymentMethod:
    """Tests for payment method models."""

    def test_decode_payment_method(self, payment_method_payload):
        method = PaymentMethod.model_validate(payment_method_payload)
        assert method.owner == SystemResourceName.account("AC_WYUXH6EWBYR")
        assert method.srn.kind is SrnKind.PAYMENT_METHOD
        assert method.last4_digits == "0000"
        assert method.chargeable_currencies == [Currency.USD]
        assert str(method.ach_srn) == "paymentmethod:PA_ABC123:ach"
        assert method.status.is_terminal

    def test_create_ach_defaults(self):
        body = CreateAchPaymentMethod(plaid_processor_token="processor-sandbox-123")
        assert body.to_wire() == {
            "plaidProcessorToken": "processor-sandbox-123",
            "paymentMethodType": "LOCAL_TRANSFER",
            "country": "US",
        }


class TestTransfer:
    """Tests for transfer models."""

    def test_create_transfer_to_wire(self):
        body = CreateTransfer(
            source=SystemResourceName.ach_payment_method("PA_ABC123"),
            source_currency=Currency.USD,
            source_amount=Decimal("20.50"),
            dest=SystemResourceName.ethereum("0xc12fae05"),
            dest_currency=Currency.USDC,
            auto_confirm=True,
        )
        assert body.to_wire() == {
            "source": "paymentmethod:PA_ABC123:ach",
            "sourceCurrency": "USD",
            "sourceAmount": "20.50",
            "dest": "ethereum:0xc12fae05",
            "destCurrency": "USDC",
            "autoConfirm": True,
        }

    def test_create_transfer_accepts_srn_strings(self):
        body = CreateTransfer.model_validate(
            {
                "source": "account:AC_1",
                "sourceCurrency": "BTC",
                "destAmount": "0.001",
                "dest": "bitcoin:14CriXWTRoJmQdBzdikw6tEmSuwxMozWWq",
            }
        )
        assert body.source == SystemResourceName.account("AC_1")
        assert body.dest_amount == Decimal("0.001")

    @pytest.mark.parametrize("dest", ["alice@example.com", "+15554445555"])
    def test_create_transfer_accepts_bare_destination(self, dest):
        body = CreateTransfer(
            source=SystemResourceName.account("AC_1"),
            source_currency=Currency.USD,
            source_amount=Decimal("5"),
            dest=dest,
        )
        assert body.dest == dest
        assert body.to_wire()["dest"] == dest

    def test_create_transfer_destination_prefers_srn(self):
        body = CreateTransfer(
            source=SystemResourceName.account("AC_1"),
            source_currency=Currency.USD,
            dest="email:alice@example.com",
        )
        assert body.dest == SystemResourceName.email("alice@example.com")
        assert body.to_wire()["dest"] == "email:alice@example.com"

    @pytest.mark.parametrize(
        "amount,wire",
        [
            (Decimal("100").normalize(), "100"),
            (Decimal("1E+2"), "100"),
            (Decimal("1E-7"), "0.0000001"),
            (Decimal("20.50"), "20.50"),
        ],
    )
    def test_amounts_are_sent_in_fixed_point(self, amount, wire):
        body = CreateTransfer(
            source=SystemResourceName.account("AC_1"),
            source_currency=Currency.USD,
            source_amount=amount,
            dest=SystemResourceName.email("alice@example.com"),
        )
        assert body.to_wire()["sourceAmount"] == wire

    def test_create_transfer_rejects_both_amounts(self):
        with pytest.raises(ValidationError, match="not both"):
            CreateTransfer(
                source=SystemResourceName.account("AC_1"),
                source_currency=Currency.USD,
                source_amount=Decimal("10"),
                dest=SystemResourceName.email("alice@example.com"),
                dest_amount=Decimal("10"),
            )

    def test_decode_transfer_keeps_exact_amounts(self, transfer_payload):
        transfer = Transfer.model_validate(transfer_payload)
        assert transfer.source == SystemResourceName.ach_payment_method("PA_ABC123")
        assert transfer.dest.kind is SrnKind.ETHEREUM
        assert transfer.source_amount == Decimal("20.5")
        assert transfer.dest_amount == Decimal("20.12")
        assert transfer.fees[Currency.USD] == Decimal("0.38")
        assert transfer.dest_currency is Currency.USDC
        assert transfer.status is TransferStatus.PENDING

    def test_transfer_round_trip(self, transfer_payload):
        transfer = Transfer.model_validate(transfer_payload)
        assert Transfer.model_validate(transfer.to_wire()) == transfer

    def test_transfer_with_unknown_currency(self, transfer_payload):
        transfer_payload["destCurrency"] = "NEWCOIN"
        transfer = Transfer.model_validate(transfer_payload)
        assert transfer.dest_currency == OtherCurrency("NEWCOIN")
        assert transfer.to_wire()["destCurrency"] == "NEWCOIN"

    @pytest.mark.parametrize(
        "status,terminal",
        [
            (TransferStatus.PREVIEW, True),
            (TransferStatus.UNCONFIRMED, False),
            (TransferStatus.PENDING, False),
            (TransferStatus.COMPLETED, True),
            (TransferStatus.REVERSED, True),
            (TransferStatus.EXPIRED, True),
            (TransferStatus.FAILED, True),
        ],
    )
    def test_terminal_statuses(self, status, terminal):
        assert status.is_terminal is terminal


class TestUser:
    """Tests for user models."""

    def test_decode_user(self, user_payload):
        user = User.model_validate(user_payload)
        assert user.id == "US_ABC123"
        assert not user.status.is_terminal

        first_name = user.fields.get(UserFieldId.FIRST_NAME)
        assert first_name.value == "Alice"
        assert first_name.status is UserFieldStatus.SUBMITTED

        address = user.fields.get(UserFieldId.RESIDENCE_ADDRESS)
        assert isinstance(address.value, Address)
        assert address.value.city == "New York City"

        last_name = user.fields.last_name
        assert last_name.value is None
        assert last_name.error == "Last name is required"

        assert user.fields.get(UserFieldId.DATE_OF_BIRTH) is None
        assert user.fields.get(UserFieldId.GOVERNMENT_ID) is None

    def test_government_id_documents(self, user_payload):
        user_payload["fields"]["governmentId"] = {
            "value": ["DO_FRONT1", "DO_BACK1"],
            "status": "SUBMITTED",
            "error": None,
        }
        user = User.model_validate(user_payload)

        government_id = user.fields.get(UserFieldId.GOVERNMENT_ID)
        assert government_id is user.fields.government_id
        assert government_id.value == ["DO_FRONT1", "DO_BACK1"]
        assert government_id.status is UserFieldStatus.SUBMITTED

    def test_unknown_user_fields_are_ignored(self, user_payload):
        user_payload["fields"]["favoriteColor"] = {"value": "blue", "status": "OPEN"}
        user = User.model_validate(user_payload)
        assert user.fields.first_name is not None

    def test_modify_user_to_wire(self):
        body = ModifyUser(
            blockchains=["ETH"],
            fields=ModifyUserFields(
                first_name="Alice",
                residence_address=Address(street1="1 Main St", country="US"),
            ),
            scopes=[UserScope.TRANSFER],
        )
        assert body.to_wire() == {
            "blockchains": ["ETH"],
            "immediate": False,
            "fields": {
                "firstName": "Alice",
                "residenceAddress": {"street1": "1 Main St", "country": "US"},
            },
            "scopes": ["TRANSFER"],
        }
