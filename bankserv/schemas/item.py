"""Pydantic schemas for transaction item payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from bankserv.schemas.common import ZERO_UUID
from bankserv.schemas.common import Identity
from bankserv.schemas.common import WireModel


class Item(WireModel):
    """Single line of a transaction."""

    uuid: Identity = ZERO_UUID
    transaction_uuid: Identity = ZERO_UUID
    description: str = ""
    amount: float = 0.0
    create_date: datetime | None = None
    update_date: datetime | None = None


class ItemData(WireModel):
    item: Item = Field(default_factory=Item)
