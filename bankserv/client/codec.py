"""JSON codec between resource models and bank service envelopes."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from bankserv.core.errors import BankDecodingError
from bankserv.core.errors import BankEncodingError
from bankserv.schemas.common import RESPONSE_CONTEXT
from bankserv.schemas.envelope import Envelope

DataT = TypeVar("DataT", bound=BaseModel)


def encode_payload(model: BaseModel) -> bytes:
    """Serialize a resource model to a JSON request body.

    Unset timestamps are left out of the body; zero identities travel as the
    nil UUID.
    """
    try:
        return model.model_dump_json(exclude_none=True).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise BankEncodingError(f"Unable to encode {type(model).__name__} payload") from exc


def decode_envelope(content: bytes | str | None, data_model: type[DataT]) -> Envelope[DataT]:
    """Decode a response body into an envelope whose data section is `data_model`."""
    if not content or not content.strip():
        content = b"{}"
    try:
        return Envelope[data_model].model_validate_json(content, context=RESPONSE_CONTEXT)
    except ValidationError as exc:
        raise BankDecodingError(f"Malformed bank service envelope: {exc}") from exc
