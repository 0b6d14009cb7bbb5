"""Shared identity and ownership types for bank service resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated
from typing import Any
from typing import TypeVar
from uuid import UUID

from pydantic import BaseModel
from pydantic import BeforeValidator
from pydantic import ValidationInfo
from pydantic import model_validator

ZERO_UUID = UUID(int=0)

RESPONSE_CONTEXT = {"response": True}


def _none_to_zero_uuid(value: Any) -> Any:
    if value is None or value == "":
        return ZERO_UUID
    return value


# The remote service sends `null` for the owner a resource does not belong to.
Identity = Annotated[UUID, BeforeValidator(_none_to_zero_uuid)]

OwnedT = TypeVar("OwnedT", bound="OwnedResource")


class WireModel(BaseModel):
    """Base for wire models whose `null` fields decode to the field default."""

    @model_validator(mode="before")
    @classmethod
    def _drop_null_fields(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {key: field for key, field in value.items() if field is not None}


class OwnerKind(str, Enum):
    USER = "user"
    ORGANISATION = "organisation"
    UNSET = "unset"


@dataclass(frozen=True)
class Owner:
    """Tagged view over the mutually exclusive user/organisation identities."""

    kind: OwnerKind
    uuid: UUID = ZERO_UUID


class OwnedResource(WireModel):
    """Base for resources that belong to either a user or an organisation."""

    user_uuid: Identity = ZERO_UUID
    organisation_uuid: Identity = ZERO_UUID

    @model_validator(mode="after")
    def _check_single_owner(self, info: ValidationInfo) -> OwnedResource:
        # Locally built payloads are left for the remote service to judge.
        if not (info.context or {}).get("response"):
            return self
        if self.user_uuid != ZERO_UUID and self.organisation_uuid != ZERO_UUID:
            raise ValueError("resource cannot belong to both a user and an organisation")
        return self

    @property
    def owner(self) -> Owner:
        if self.user_uuid != ZERO_UUID:
            return Owner(kind=OwnerKind.USER, uuid=self.user_uuid)
        if self.organisation_uuid != ZERO_UUID:
            return Owner(kind=OwnerKind.ORGANISATION, uuid=self.organisation_uuid)
        return Owner(kind=OwnerKind.UNSET)

    @classmethod
    def for_user(cls: type[OwnedT], user_uuid: UUID | str, **fields: Any) -> OwnedT:
        """Build a resource owned by a user."""
        return cls(user_uuid=user_uuid, organisation_uuid=ZERO_UUID, **fields)

    @classmethod
    def for_organisation(cls: type[OwnedT], organisation_uuid: UUID | str, **fields: Any) -> OwnedT:
        """Build a resource owned by an organisation."""
        return cls(user_uuid=ZERO_UUID, organisation_uuid=organisation_uuid, **fields)
