"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field

from dotenv import load_dotenv

from inventory_sheets.domain.retry import RetryPolicy
from inventory_sheets.errors import ConfigurationError

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_BASE_DELAY = 0.5


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = -1.0
    if value < 0:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    return value


def load_config() -> dict:
    """Read the client settings from the environment."""
    return {
        # Apps Script web app deployment URL
        "script_url": os.getenv("SHEETS_SCRIPT_URL", "").strip(),
        "user_email": os.getenv("SHEETS_USER_EMAIL", "").strip(),
        "debug": _env_flag("SHEETS_DEBUG"),
        "retry": {
            "max_attempts": _env_int("SHEETS_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
            "base_delay": _env_float("SHEETS_RETRY_BASE_DELAY", DEFAULT_RETRY_BASE_DELAY),
        },
    }


CONFIG = load_config()


# ── Typed config ──────────────────────────────────────


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client settings shared by every call of one client."""

    script_url: str = ""
    user_email: str = ""
    debug: bool = False
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    @property
    def is_configured(self) -> bool:
        return bool(self.script_url and self.user_email)

    def validate(self) -> "ClientConfig":
        if not self.script_url:
            raise ConfigurationError("SHEETS_SCRIPT_URL not configured.")
        if not self.user_email:
            raise ConfigurationError("SHEETS_USER_EMAIL not configured.")
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "ClientConfig":
        return cls(
            script_url=data.get("script_url", ""),
            user_email=data.get("user_email", ""),
            debug=bool(data.get("debug", False)),
            retry=RetryPolicy(**data.get("retry", {})),
        )

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create ClientConfig from environment variables."""
        return cls.from_dict(load_config())
