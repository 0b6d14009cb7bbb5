"""Immutable per-call request descriptors for bank service endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from urllib.parse import urlencode
from uuid import UUID

from pydantic import BaseModel

# Trailing path segment for endpoints whose target is named by the query
# string or the payload rather than the path.
PLACEHOLDER_SEGMENT = "-"


def uuid_params(identifier: UUID | str) -> Mapping[str, str]:
    """Encode one resource identifier as the `uuid` query parameter."""
    return {"uuid": str(as_uuid(identifier))}


def as_uuid(identifier: UUID | str) -> UUID:
    """Validate a UUID-formatted identifier before any network I/O."""
    if isinstance(identifier, UUID):
        return identifier
    if not isinstance(identifier, str):
        raise ValueError(f"identifier must be a UUID, got {type(identifier).__name__}")
    try:
        return UUID(identifier)
    except ValueError as exc:
        raise ValueError(f"identifier `{identifier}` is not a valid UUID") from exc


@dataclass(frozen=True)
class BankRequest:
    """Method, path, query and payload of one bank service call.

    A fresh descriptor is built for every call, so concurrent calls on one
    client never share URL state.
    """

    method: str
    path: str
    params: Mapping[str, str] = field(default_factory=dict)
    payload: BaseModel | None = None

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ValueError("path must start with `/`")
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def url(self, base_url: str) -> str:
        """Resolve the absolute URL of this request against a base URL."""
        url = f"{base_url.rstrip('/')}{self.path}"
        if self.params:
            url = f"{url}?{urlencode(self.params)}"
        return url


def placeholder_path(*segments: str) -> str:
    """Build `/<segments...>/-` for endpoints acting on a query- or body-identified target."""
    return "/" + "/".join([*segments, PLACEHOLDER_SEGMENT])
