"""Wyre API client."""

import logging
from decimal import Decimal
from typing import Any, Optional, Sequence, TypeVar, Union

import httpx
from pydantic import BaseModel, SecretStr, ValidationError

from wyre.config import ClientConfig, Environment, WyreSettings, load_config
from wyre.exceptions import (
    ResponseDecodeError,
    TransportError,
    find_codec_error,
    raise_for_error_response,
)
from wyre.srn import SystemResourceName
from wyre.types.account import Account, CreateAccount, MasterAccount, UpdateAccount, UploadDocument
from wyre.types.payment_method import CreateAchPaymentMethod, PaymentMethod, PaymentMethodList
from wyre.types.transfer import CreateTransfer, Transfer
from wyre.types.user import KycOnboardingUrl, ModifyUser, UploadUserDocument, User, UserScope

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# A sub-account to act on behalf of, as an SRN or a bare account id
Masquerade = Union[SystemResourceName, str, None]


def _masquerade_param(masquerade: Masquerade) -> dict[str, str]:
    # The API expects the parameter even when no masquerade is wanted
    return {"masqueradeAs": "" if masquerade is None else str(masquerade)}


def _secret(value: Union[str, SecretStr]) -> SecretStr:
    return value if isinstance(value, SecretStr) else SecretStr(value)


class WyreClient:
    """Client for the Wyre API.

    The client holds no mutable state besides the underlying httpx client,
    so a single instance can be shared between threads.

    Args:
        api_key: API key (kept, but not sent by any current operation)
        api_secret: API secret, sent as the bearer token
        environment: Test or production
        timeout: Request timeout in seconds, handed to httpx
        transport: Custom httpx transport, e.g. ``httpx.MockTransport`` in tests
    """

    def __init__(
        self,
        api_key: Union[str, SecretStr],
        api_secret: Union[str, SecretStr],
        environment: Environment = Environment.TEST,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.api_key = _secret(api_key)
        self.api_secret = _secret(api_secret)
        self.environment = environment
        self.base_url = environment.api_url
        self.timeout = timeout
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {self.api_secret.get_secret_value()}",
                "Content-Type": "application/json",
            },
        )

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "WyreClient":
        """Create a client from a loaded configuration."""
        return cls(config.api_key, config.api_secret, config.environment, **kwargs)

    @classmethod
    def from_env(cls, settings: Optional[WyreSettings] = None, **kwargs: Any) -> "WyreClient":
        """Create a client from ``WYRE_API_KEY``, ``WYRE_API_SECRET`` and
        ``WYRE_ENVIRONMENT``.

        Raises:
            ConfigurationError: a variable is missing or invalid
        """
        return cls.from_config(load_config(settings), **kwargs)

    def __enter__(self) -> "WyreClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
        content: Optional[bytes] = None,
        content_type: Optional[str] = None,
    ) -> Any:
        """Make an HTTP request to the API.

        Args:
            method: HTTP method
            path: API path
            json: JSON body
            params: Query parameters
            content: Raw body, used for document uploads
            content_type: Content type of the raw body

        Returns:
            Decoded JSON body of a 200 response, with numbers as Decimal

        Raises:
            WyreAPIError: If the API returns an error
            TransportError: If the request could not be completed
            ResponseDecodeError: If the body is not JSON
        """
        headers = {}
        if content_type:
            headers["Content-Type"] = content_type

        logger.debug(f"{method} {path} params={params}")
        try:
            response = self._client.request(
                method=method,
                url=path,
                json=json,
                content=content,
                params=params,
                headers=headers,
            )
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} failed in transport: {e!r}")
            raise TransportError(f"{method} {path}: {e}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        try:
            data = response.json(parse_float=Decimal)
        except ValueError as e:
            raise ResponseDecodeError(
                "response body is not valid JSON",
                response.status_code,
                body=response.text,
            ) from e

        if response.status_code != 200:
            logger.warning(f"{method} {path} returned {response.status_code}")
            raise_for_error_response(response.status_code, data)

        return data

    def _parse(self, model: type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            codec_error = find_codec_error(e)
            raise ResponseDecodeError(
                f"{model.__name__} does not match the response: {e}",
                200,
                body=repr(data),
                codec_error=codec_error,
            ) from (codec_error or e)

    # ==================== Accounts ====================

    def get_master_account(self) -> MasterAccount:
        """Get the account the credentials belong to.

        Returns:
            Master account
        """
        data = self._request("GET", "/v2/account")
        return self._parse(MasterAccount, data)

    def create_account(
        self,
        body: CreateAccount,
        masquerade: Masquerade = None,
    ) -> Account:
        """Create an account.

        Args:
            body: Account type, country and initial profile fields
            masquerade: Sub-account to act on behalf of

        Returns:
            The new account
        """
        data = self._request(
            "POST",
            "/v3/accounts",
            json=body.to_wire(),
            params=_masquerade_param(masquerade),
        )
        return self._parse(Account, data)

    def get_account(
        self,
        account_id: str,
        masquerade: Masquerade = None,
    ) -> Account:
        """Get an account and its profile fields.

        Args:
            account_id: Account id (e.g. "AC_ABC123")
            masquerade: Sub-account to act on behalf of

        Returns:
            Account
        """
        data = self._request(
            "GET",
            f"/v3/accounts/{account_id}",
            params=_masquerade_param(masquerade),
        )
        return self._parse(Account, data)

    def update_account(
        self,
        account_id: str,
        body: UpdateAccount,
        masquerade: Masquerade = None,
    ) -> Account:
        """Submit profile field values for an account.

        Args:
            account_id: Account id
            body: Profile fields to submit
            masquerade: Sub-account to act on behalf of

        Returns:
            Updated account
        """
        data = self._request(
            "POST",
            f"/v3/accounts/{account_id}",
            json=body.to_wire(),
            params=_masquerade_param(masquerade),
        )
        return self._parse(Account, data)

    def upload_document(
        self,
        account_id: str,
        document: UploadDocument,
    ) -> Account:
        """Upload a document for a DOCUMENT-typed profile field.

        The body is sent as-is with the document's content type. The call
        always acts on behalf of the account itself.

        Args:
            account_id: Account id
            document: Field id, raw bytes, content type and document kind

        Returns:
            Updated account
        """
        params: dict[str, Any] = {}
        if document.document_type:
            params["documentType"] = document.document_type.value
        if document.document_sub_type:
            params["documentSubType"] = document.document_sub_type.value
        params.update(_masquerade_param(account_id))

        data = self._request(
            "POST",
            f"/v3/accounts/{account_id}/{document.field_id.value}",
            params=params,
            content=document.document,
            content_type=document.content_type,
        )
        return self._parse(Account, data)

    # ==================== Payment Methods ====================

    def create_ach_payment_method(
        self,
        body: CreateAchPaymentMethod,
        masquerade: Masquerade = None,
    ) -> PaymentMethod:
        """Link a bank account through a Plaid processor token.

        Args:
            body: Processor token, payment method type and country
            masquerade: Sub-account that will own the payment method

        Returns:
            Payment method, usually PENDING at first
        """
        data = self._request(
            "POST",
            "/v2/paymentMethods",
            json=body.to_wire(),
            params=_masquerade_param(masquerade),
        )
        return self._parse(PaymentMethod, data)

    def get_payment_methods(
        self,
        masquerade: Masquerade = None,
        offset: int = 0,
        limit: int = 20,
    ) -> PaymentMethodList:
        """List payment methods.

        Args:
            masquerade: Sub-account whose payment methods to list
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            One page of payment methods with total and filtered counts
        """
        params: dict[str, Any] = {"offset": offset, "limit": limit}
        params.update(_masquerade_param(masquerade))

        data = self._request("GET", "/v2/paymentMethods", params=params)
        return self._parse(PaymentMethodList, data)

    # ==================== Transfers ====================

    def create_transfer(
        self,
        body: CreateTransfer,
        masquerade: Masquerade = None,
    ) -> Transfer:
        """Create a transfer (or a quote, with ``preview=True``).

        Unless ``auto_confirm`` is set the transfer must be confirmed within
        30 seconds or the server expires it.

        Args:
            body: Source, destination, currencies and amount
            masquerade: Sub-account to act on behalf of

        Returns:
            Transfer
        """
        data = self._request(
            "POST",
            "/v3/transfers",
            json=body.to_wire(),
            params=_masquerade_param(masquerade),
        )
        return self._parse(Transfer, data)

    def confirm_transfer(
        self,
        transfer_id: str,
        masquerade: Masquerade = None,
    ) -> Transfer:
        """Confirm an UNCONFIRMED transfer.

        Args:
            transfer_id: Transfer id (e.g. "TF_ABC123")
            masquerade: Sub-account to act on behalf of

        Returns:
            Transfer, now PENDING
        """
        data = self._request(
            "POST",
            f"/v3/transfers/{transfer_id}/confirm",
            params=_masquerade_param(masquerade),
        )
        return self._parse(Transfer, data)

    def get_transfer(
        self,
        transfer_id: str,
        masquerade: Masquerade = None,
    ) -> Transfer:
        """Get a transfer.

        Args:
            transfer_id: Transfer id
            masquerade: Sub-account to act on behalf of

        Returns:
            Transfer
        """
        data = self._request(
            "GET",
            f"/v3/transfers/{transfer_id}",
            params=_masquerade_param(masquerade),
        )
        return self._parse(Transfer, data)

    # ==================== Users ====================

    def create_user(
        self,
        body: ModifyUser,
        masquerade: Masquerade = None,
    ) -> User:
        """Create a user.

        Args:
            body: Field values, blockchains and scopes
            masquerade: Sub-account to act on behalf of

        Returns:
            The new user
        """
        data = self._request(
            "POST",
            "/v3/users",
            json=body.to_wire(),
            params=_masquerade_param(masquerade),
        )
        return self._parse(User, data)

    def get_user(
        self,
        user_id: str,
        scopes: Optional[Sequence[UserScope]] = None,
        masquerade: Masquerade = None,
    ) -> User:
        """Get a user.

        Args:
            user_id: User id (e.g. "US_ABC123")
            scopes: KYC scopes to bias the returned view towards
            masquerade: Sub-account to act on behalf of

        Returns:
            User
        """
        params: dict[str, Any] = {}
        if scopes:
            params["scopes"] = ",".join(scope.value for scope in scopes)
        params.update(_masquerade_param(masquerade))

        data = self._request("GET", f"/v3/users/{user_id}", params=params)
        return self._parse(User, data)

    def update_user(
        self,
        user_id: str,
        body: ModifyUser,
        masquerade: Masquerade = None,
    ) -> User:
        """Submit field values for a user.

        Args:
            user_id: User id
            body: Field values, blockchains and scopes
            masquerade: Sub-account to act on behalf of

        Returns:
            Updated user
        """
        data = self._request(
            "POST",
            f"/v3/users/{user_id}",
            json=body.to_wire(),
            params=_masquerade_param(masquerade),
        )
        return self._parse(User, data)

    def get_kyc_onboarding_url(
        self,
        user_id: str,
        masquerade: Masquerade = None,
    ) -> KycOnboardingUrl:
        """Get the hosted KYC onboarding page for a user.

        Args:
            user_id: User id
            masquerade: Sub-account to act on behalf of

        Returns:
            Onboarding URL
        """
        data = self._request(
            "GET",
            f"/v3/users/{user_id}/onboarding",
            params=_masquerade_param(masquerade),
        )
        return self._parse(KycOnboardingUrl, data)

    def upload_user_document(
        self,
        user_id: str,
        document: UploadUserDocument,
        masquerade: Masquerade = None,
    ) -> User:
        """Upload a document for a user field.

        Args:
            user_id: User id
            document: Field id, raw bytes, content type and document kind
            masquerade: Sub-account to act on behalf of

        Returns:
            Updated user
        """
        params: dict[str, Any] = {}
        if document.document_type:
            params["documentType"] = document.document_type.value
        if document.document_sub_type:
            params["documentSubType"] = document.document_sub_type.value
        params.update(_masquerade_param(masquerade))

        data = self._request(
            "POST",
            f"/v3/users/{user_id}/{document.field_id.value}",
            params=params,
            content=document.document,
            content_type=document.content_type,
        )
        return self._parse(User, data)
