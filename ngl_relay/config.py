"""Relay settings parsed from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


def _read_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return default


def _read_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except Exception:
        return default


@dataclass(frozen=True)
class RelaySettings:
    base_url: str = field(default_factory=lambda: os.getenv("NGL_BASE_URL", "https://ngl.link").rstrip("/"))
    submit_path: str = field(default_factory=lambda: os.getenv("NGL_SUBMIT_PATH", "/api/submit"))
    user_agent: str = field(default_factory=lambda: os.getenv("NGL_USER_AGENT", DEFAULT_USER_AGENT))
    timeout: float = field(default_factory=lambda: _read_float("NGL_TIMEOUT", 5.0))
    locale: str = field(default_factory=lambda: os.getenv("RELAY_LOCALE", "id"))
    messages_file: Optional[str] = field(default_factory=lambda: os.getenv("RELAY_MESSAGES_FILE") or None)
    host: str = field(default_factory=lambda: os.getenv("RELAY_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _read_int("RELAY_PORT", 8000))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    @property
    def submit_url(self) -> str:
        return f"{self.base_url}{self.submit_path}"

    @property
    def as_dict(self) -> dict:
        return {
            "base_url": self.base_url,
            "submit_path": self.submit_path,
            "timeout": self.timeout,
            "locale": self.locale,
            "messages_file": self.messages_file,
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
        }


def get_settings() -> RelaySettings:
    """Read settings from the current environment"""
    return RelaySettings()
