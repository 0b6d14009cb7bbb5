"""Error hierarchy raised by bank service client operations."""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence

ErrorMap = dict[str, list[str]]


class BankServiceError(RuntimeError):
    """Base error raised by bank service client operations."""


class BankTransportError(BankServiceError):
    """Raised when the HTTP call itself fails (connection, timeout, protocol)."""


class BankEncodingError(BankServiceError):
    """Raised when a request payload cannot be serialized."""


class BankDecodingError(BankServiceError):
    """Raised when a response body is not a well-formed envelope."""


class BankRemoteError(BankServiceError):
    """Raised when the bank service answers with an unexpected status code.

    The remote service explains failures as a map of field or category name to
    an ordered list of messages, e.g. ``{"permission": ["Please ensure you have
    permission"]}``. Two remote errors are equal when their error maps are
    equal; ``status_code`` and ``message`` do not take part in equality.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        *,
        status_code: int,
        errors: Mapping[str, Sequence[str]] | None = None,
        message: str = "",
    ) -> None:
        self.status_code = status_code
        self.errors: ErrorMap = {key: list(value) for key, value in (errors or {}).items()}
        self.message = message
        super().__init__(self._describe())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BankRemoteError):
            return NotImplemented
        return self.errors == other.errors

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, errors={self.errors!r})"

    def _describe(self) -> str:
        summary = f"Bank service responded with status {self.status_code}"
        if self.message:
            summary = f"{summary}: {self.message}"
        if self.errors:
            details = "; ".join(f"{key}: {', '.join(messages)}" for key, messages in self.errors.items())
            summary = f"{summary} ({details})"
        return summary


def errors_equal(left: BaseException | None, right: BaseException | None) -> bool:
    """Compare two optional client errors the way callers assert on them.

    ``None`` only equals ``None``. Remote errors compare by error map, any
    other errors by type and message.
    """
    if left is None or right is None:
        return left is None and right is None
    if isinstance(left, BankRemoteError) and isinstance(right, BankRemoteError):
        return left == right
    return type(left) is type(right) and str(left) == str(right)
