"""Bank service connection settings."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os
from urllib.parse import urlunsplit

DEFAULT_BANK_SERVICE_SCHEME = "http"
DEFAULT_BANK_SERVICE_HOST = "localhost:5000"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def build_base_url(scheme: str, host: str) -> str:
    """Join a scheme and host into the absolute base URL every request starts from."""
    scheme = scheme.strip().rstrip(":/")
    host = host.strip().strip("/")
    if not scheme:
        raise ValueError("scheme is required")
    if not host:
        raise ValueError("host is required")
    return urlunsplit((scheme, host, "", "", ""))


def redact_secret(secret: str) -> str:
    """Return a non-recoverable placeholder for sensitive values."""
    if not secret:
        return "<empty>"
    return "<redacted>"


@dataclass(frozen=True)
class BankServiceSettings:
    """Runtime settings for calls to the bank service."""

    scheme: str = DEFAULT_BANK_SERVICE_SCHEME
    host: str = DEFAULT_BANK_SERVICE_HOST
    token: str = ""
    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    @property
    def base_url(self) -> str:
        return build_base_url(self.scheme, self.host)

    def safe_for_logging(self) -> dict[str, str | float]:
        """Return bank service settings safe for logs."""
        return {
            "scheme": self.scheme,
            "host": self.host,
            "token": redact_secret(self.token),
            "timeout_seconds": self.timeout_seconds,
        }


@lru_cache(maxsize=1)
def get_bank_service_settings() -> BankServiceSettings:
    """Load bank service settings from the environment, falling back to defaults."""
    return BankServiceSettings(
        scheme=_get_str_env("BANK_SERVICE_SCHEME", DEFAULT_BANK_SERVICE_SCHEME),
        host=_get_str_env("BANK_SERVICE_HOST", DEFAULT_BANK_SERVICE_HOST),
        token=os.getenv("BANK_SERVICE_TOKEN", ""),
        timeout_seconds=_get_float_env("BANK_SERVICE_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS),
    )
