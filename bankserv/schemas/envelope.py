"""Response envelope shared by every bank service endpoint."""

from __future__ import annotations

from typing import Any
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator

DataT = TypeVar("DataT", bound=BaseModel)


class EmptyData(BaseModel):
    """Data section of responses that carry no resource, e.g. deletes."""


class Envelope(BaseModel, Generic[DataT]):
    """Top-level `{message, data, errors}` wrapper present on every response.

    Error responses carry the same shape with an empty `data` object, so the
    envelope always decodes before the status code is inspected.
    """

    message: str = ""
    data: DataT
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _fill_missing_sections(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        filled = dict(value)
        if filled.get("message") is None:
            filled["message"] = ""
        for section in ("data", "errors"):
            if filled.get(section) is None:
                filled[section] = {}
        if isinstance(filled["errors"], dict):
            filled["errors"] = {
                key: [] if messages is None else messages for key, messages in filled["errors"].items()
            }
        return filled
