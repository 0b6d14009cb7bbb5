"""Pydantic schemas for tag payloads.

Tags with neither a user nor an organisation owner are system defaults shared
by everyone.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from bankserv.schemas.common import ZERO_UUID
from bankserv.schemas.common import Identity
from bankserv.schemas.common import OwnedResource
from bankserv.schemas.common import WireModel


class Tag(OwnedResource):
    """Classification label attached to items."""

    uuid: Identity = ZERO_UUID
    tag: str = ""
    create_date: datetime | None = None
    update_date: datetime | None = None

    @property
    def is_system_default(self) -> bool:
        return self.user_uuid == ZERO_UUID and self.organisation_uuid == ZERO_UUID


Tags = list[Tag]


class TagData(WireModel):
    tag: Tag = Field(default_factory=Tag)


class TagsData(WireModel):
    tags: list[Tag] = Field(default_factory=list)
