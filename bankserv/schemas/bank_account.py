"""Pydantic schemas for bank account payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from bankserv.schemas.common import ZERO_UUID
from bankserv.schemas.common import Identity
from bankserv.schemas.common import OwnedResource
from bankserv.schemas.common import WireModel


class BankAccount(OwnedResource):
    """Bank account held by exactly one user or organisation."""

    uuid: Identity = ZERO_UUID
    account_number: str = ""
    active: bool = False
    create_date: datetime | None = None
    update_date: datetime | None = None


BankAccounts = list[BankAccount]


class BankAccountData(WireModel):
    bank_account: BankAccount = Field(default_factory=BankAccount)


class BankAccountsData(WireModel):
    bank_accounts: list[BankAccount] = Field(default_factory=list)
