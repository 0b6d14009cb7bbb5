"""Contract tests for transaction item operations against the mock bank service."""

from __future__ import annotations

from uuid import UUID

import pytest

from bankserv.client.service import BankService
from bankserv.core.errors import BankDecodingError
from bankserv.core.errors import BankRemoteError
from bankserv.schemas.item import Item

ITEM_UUID = "2b9d3c8a-7f1e-4b55-9a4e-0b0f5f3c2d11"
TRANSACTION_UUID = "a4c1e8d2-3b6f-4d7a-8e9c-1f2a3b4c5d6e"

ITEM_RESPONSE = (
    '{"message":"item created","data":{"item":{'
    f'"uuid":"{ITEM_UUID}","transaction_uuid":"{TRANSACTION_UUID}",'
    '"description":"groceries","amount":149.95,'
    '"create_date":"2022-06-18T08:00:00.000Z","update_date":"2022-06-18T08:00:00.000Z"'
    '}},"errors":{}}'
)


def test_create_item_returns_created_item(bank_service: BankService, mock_bank) -> None:
    mock_bank.append(201, ITEM_RESPONSE)

    created = bank_service.create_item(Item(transaction_uuid=TRANSACTION_UUID, description="groceries", amount=149.95))

    assert created.uuid == UUID(ITEM_UUID)
    assert created.transaction_uuid == UUID(TRANSACTION_UUID)
    assert created.description == "groceries"
    assert created.amount == pytest.approx(149.95)
    assert mock_bank.last_request.method == "POST"
    assert mock_bank.last_request.path == "/item"
    assert mock_bank.last_request.json()["transaction_uuid"] == TRANSACTION_UUID


def test_create_item_raises_remote_error_when_transaction_missing(bank_service: BankService, mock_bank) -> None:
    mock_bank.append(
        404,
        '{"message":"NotFound: unable to find resource","data":{},"errors":{"transaction":["not found"]}}',
    )

    with pytest.raises(BankRemoteError) as exc_info:
        bank_service.create_item(Item(transaction_uuid=TRANSACTION_UUID))

    assert exc_info.value.status_code == 404
    assert exc_info.value.errors == {"transaction": ["not found"]}


def test_update_item_sends_uuid_in_body_not_path(bank_service: BankService, mock_bank) -> None:
    mock_bank.append(200, ITEM_RESPONSE)

    updated = bank_service.update_item(Item(uuid=ITEM_UUID, transaction_uuid=TRANSACTION_UUID, description="groceries"))

    assert updated.uuid == UUID(ITEM_UUID)
    assert mock_bank.last_request.method == "PUT"
    assert mock_bank.last_request.path == "/item/-"
    assert mock_bank.last_request.query == {}
    assert mock_bank.last_request.json()["uuid"] == ITEM_UUID


def test_update_item_raises_remote_error_with_all_messages_in_order(bank_service: BankService, mock_bank) -> None:
    mock_bank.append(
        400,
        '{"message":"BadRequest","data":{},"errors":{"amount":["is required","must be a number"]}}',
    )

    with pytest.raises(BankRemoteError) as exc_info:
        bank_service.update_item(Item(uuid=ITEM_UUID))

    assert exc_info.value.errors == {"amount": ["is required", "must be a number"]}


def test_delete_item_sends_uuid_query(bank_service: BankService, mock_bank) -> None:
    mock_bank.append(200, '{"message":"item deleted","data":{},"errors":{}}')

    assert bank_service.delete_item(ITEM_UUID) is None
    assert mock_bank.last_request.method == "DELETE"
    assert mock_bank.last_request.path == "/item/-"
    assert mock_bank.last_request.query == {"uuid": ITEM_UUID}


def test_delete_item_raises_remote_error_when_item_not_found(bank_service: BankService, mock_bank) -> None:
    mock_bank.append(404, '{"message":"NotFound","data":{},"errors":{"item":["not found"]}}')

    with pytest.raises(BankRemoteError) as exc_info:
        bank_service.delete_item(ITEM_UUID)

    assert exc_info.value.errors == {"item": ["not found"]}


def test_malformed_response_raises_decoding_error(bank_service: BankService, mock_bank) -> None:
    mock_bank.append(201, "<html>gateway error</html>")

    with pytest.raises(BankDecodingError):
        bank_service.create_item(Item(transaction_uuid=TRANSACTION_UUID))


def test_update_item_keeps_error_map_when_item_is_null(bank_service: BankService, mock_bank) -> None:
    mock_bank.append(404, '{"message":"NotFound","data":{"item":null},"errors":{"item":["not found"]}}')

    with pytest.raises(BankRemoteError) as exc_info:
        bank_service.update_item(Item(uuid=ITEM_UUID))

    assert exc_info.value.status_code == 404
    assert exc_info.value.errors == {"item": ["not found"]}


def test_create_item_decodes_null_fields_to_defaults(bank_service: BankService, mock_bank) -> None:
    mock_bank.append(
        201,
        '{"message":"item created","data":{"item":{'
        f'"uuid":"{ITEM_UUID}","transaction_uuid":"{TRANSACTION_UUID}","description":null,"amount":null'
        '}},"errors":{}}',
    )

    created = bank_service.create_item(Item(transaction_uuid=TRANSACTION_UUID))

    assert created.description == ""
    assert created.amount == 0.0
