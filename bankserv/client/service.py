"""Bank service client: request dispatch and status classification."""

from __future__ import annotations

import logging
from typing import TypeVar
from uuid import UUID

import requests
from pydantic import BaseModel

from bankserv.client.codec import decode_envelope
from bankserv.client.codec import encode_payload
from bankserv.client.request import BankRequest
from bankserv.client.request import placeholder_path
from bankserv.client.request import uuid_params
from bankserv.client.transport import BankTransport
from bankserv.core.config import BankServiceSettings
from bankserv.core.config import get_bank_service_settings
from bankserv.core.errors import BankRemoteError
from bankserv.schemas.bank_account import BankAccount
from bankserv.schemas.bank_account import BankAccountData
from bankserv.schemas.bank_account import BankAccounts
from bankserv.schemas.bank_account import BankAccountsData
from bankserv.schemas.envelope import EmptyData
from bankserv.schemas.item import Item
from bankserv.schemas.item import ItemData
from bankserv.schemas.tag import Tag
from bankserv.schemas.tag import TagData
from bankserv.schemas.tag import Tags
from bankserv.schemas.tag import TagsData

logger = logging.getLogger(__name__)

DataT = TypeVar("DataT", bound=BaseModel)

STATUS_OK = 200
STATUS_CREATED = 201


class BankService:
    """Typed client for the bank microservice.

    Every operation builds its own `BankRequest`, sends it once and decodes the
    `{message, data, errors}` envelope before classifying the status code. A
    status other than the one the operation expects raises `BankRemoteError`
    with the remote error map; decoded data on such responses is discarded.
    """

    def __init__(
        self,
        token: str = "",
        *,
        settings: BankServiceSettings | None = None,
        session: requests.Session | None = None,
        transport: BankTransport | None = None,
    ) -> None:
        settings = settings or get_bank_service_settings()
        self._base_url = settings.base_url
        self._transport = transport or BankTransport(
            token=token or settings.token,
            timeout_seconds=settings.timeout_seconds,
            session=session,
        )
        logger.debug("Configured bank service client with settings=%s", settings.safe_for_logging())

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> BankService:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    # Bank accounts

    def get_user_bank_accounts(self, user_uuid: UUID | str) -> BankAccounts:
        """Return the bank accounts of a user; `[]` when the user has none."""
        request = BankRequest("GET", placeholder_path("bank-account", "user"), params=uuid_params(user_uuid))
        return self._dispatch(request, BankAccountsData).bank_accounts

    def get_organisation_bank_accounts(self, organisation_uuid: UUID | str) -> BankAccounts:
        """Return the bank accounts of an organisation; `[]` when it has none."""
        request = BankRequest(
            "GET",
            placeholder_path("bank-account", "organisation"),
            params=uuid_params(organisation_uuid),
        )
        return self._dispatch(request, BankAccountsData).bank_accounts

    def create_bank_account(self, bank_account: BankAccount) -> BankAccount:
        """Create a bank account; the service assigns its UUID and timestamps."""
        request = BankRequest("POST", "/bank-account", payload=bank_account)
        return self._dispatch(request, BankAccountData, expected_status=STATUS_CREATED).bank_account

    def update_bank_account(self, bank_account: BankAccount) -> BankAccount:
        """Update the bank account identified by `bank_account.uuid`."""
        request = BankRequest("PUT", placeholder_path("bank-account"), payload=bank_account)
        return self._dispatch(request, BankAccountData).bank_account

    def delete_bank_account(self, bank_account_uuid: UUID | str) -> None:
        request = BankRequest("DELETE", placeholder_path("bank-account"), params=uuid_params(bank_account_uuid))
        self._dispatch(request, EmptyData)

    # Items

    def create_item(self, item: Item) -> Item:
        """Create a transaction item."""
        request = BankRequest("POST", "/item", payload=item)
        return self._dispatch(request, ItemData, expected_status=STATUS_CREATED).item

    def update_item(self, item: Item) -> Item:
        """Update the item identified by `item.uuid`, which travels in the body."""
        request = BankRequest("PUT", placeholder_path("item"), payload=item)
        return self._dispatch(request, ItemData).item

    def delete_item(self, item_uuid: UUID | str) -> None:
        request = BankRequest("DELETE", placeholder_path("item"), params=uuid_params(item_uuid))
        self._dispatch(request, EmptyData)

    # Tags

    def get_tags(self) -> Tags:
        """Return the system default tags shared by all users and organisations."""
        return self._dispatch(BankRequest("GET", "/tag"), TagsData).tags

    def get_user_tags(self, user_uuid: UUID | str) -> Tags:
        request = BankRequest("GET", placeholder_path("tag", "user"), params=uuid_params(user_uuid))
        return self._dispatch(request, TagsData).tags

    def get_organisation_tags(self, organisation_uuid: UUID | str) -> Tags:
        request = BankRequest("GET", placeholder_path("tag", "organisation"), params=uuid_params(organisation_uuid))
        return self._dispatch(request, TagsData).tags

    def create_tag(self, tag: Tag) -> Tag:
        request = BankRequest("POST", "/tag", payload=tag)
        return self._dispatch(request, TagData, expected_status=STATUS_CREATED).tag

    def update_tag(self, tag: Tag) -> Tag:
        request = BankRequest("PUT", placeholder_path("tag"), payload=tag)
        return self._dispatch(request, TagData).tag

    def delete_tag(self, tag_uuid: UUID | str) -> None:
        request = BankRequest("DELETE", placeholder_path("tag"), params=uuid_params(tag_uuid))
        self._dispatch(request, EmptyData)

    def _dispatch(
        self,
        request: BankRequest,
        data_model: type[DataT],
        *,
        expected_status: int = STATUS_OK,
    ) -> DataT:
        url = request.url(self._base_url)
        body = encode_payload(request.payload) if request.payload is not None else None

        logger.debug("Dispatching bank service request %s %s", request.method, url)
        response = self._transport.send(request.method, url, body)

        # Failure responses share the envelope shape, so decode before classifying.
        envelope = decode_envelope(response.content, data_model)
        if response.status_code != expected_status:
            logger.info(
                "Bank service request %s %s failed with status=%s errors=%s",
                request.method,
                url,
                response.status_code,
                sorted(envelope.errors),
            )
            raise BankRemoteError(
                status_code=response.status_code,
                errors=envelope.errors,
                message=envelope.message,
            )
        return envelope.data
