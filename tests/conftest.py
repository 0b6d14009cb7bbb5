"""Shared pytest fixtures for bankserv test suites."""

from __future__ import annotations

from collections import deque
from collections.abc import Generator
from dataclasses import dataclass
import json
from pathlib import Path
import sys
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi import Request
from fastapi import Response
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bankserv.client.service import BankService  # noqa: E402
from bankserv.core.config import BankServiceSettings  # noqa: E402

MOCK_BANK_SETTINGS = BankServiceSettings(scheme="http", host="bank.test", token="test-token")


@dataclass(frozen=True)
class Exchange:
    """Canned response the mock bank service replays for the next request."""

    status: int
    body: str


@dataclass(frozen=True)
class RecordedRequest:
    method: str
    path: str
    query: dict[str, str]
    headers: dict[str, str]
    body: bytes

    def json(self) -> Any:
        return json.loads(self.body)


class MockBankService:
    """In-process bank service that replays queued exchanges in order.

    Exposes a `requests.Session`-compatible `request` method so it can be
    injected into `BankService` as the transport session.
    """

    def __init__(self) -> None:
        self.exchanges: deque[Exchange] = deque()
        self.requests: list[RecordedRequest] = []
        self.app = FastAPI()

        @self.app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE"])
        async def replay(request: Request) -> Response:
            self.requests.append(
                RecordedRequest(
                    method=request.method,
                    path=request.url.path,
                    query=dict(request.query_params),
                    headers=dict(request.headers),
                    body=await request.body(),
                )
            )
            if not self.exchanges:
                return Response(content='{"message":"no exchange queued","data":{},"errors":{}}', status_code=500)
            exchange = self.exchanges.popleft()
            return Response(content=exchange.body, status_code=exchange.status, media_type="application/json")

        self._client = TestClient(self.app)

    def append(self, status: int, body: str) -> None:
        self.exchanges.append(Exchange(status=status, body=body))

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    def request(self, method: str, url: str, *, headers: dict[str, str], data: bytes | None, timeout: float):
        return self._client.request(method, url, headers=headers, content=data)

    def close(self) -> None:
        self._client.close()


@pytest.fixture
def mock_bank() -> Generator[MockBankService, None, None]:
    """Provide a mock bank service with an empty exchange queue."""
    mock = MockBankService()
    yield mock
    mock.close()


@pytest.fixture
def bank_service(mock_bank: MockBankService) -> BankService:
    """Provide a bank service client wired to the mock bank service."""
    return BankService(settings=MOCK_BANK_SETTINGS, session=mock_bank)  # type: ignore[arg-type]
