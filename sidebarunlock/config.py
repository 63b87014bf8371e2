"""Configuration management for SidebarUnlock."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sidebarunlock.models import (
    DEFAULT_CLIENT_NAME,
    DEFAULT_CLIENT_VERSION,
    Layout,
    SessionContext,
)


DEFAULT_CONFIG_PATH = "~/.sidebarunlock/config.json"
DEFAULT_PROXY_HOST = "https://youtube-proxy.zerody.one"
DEFAULT_TIMEOUT = 30.0


def default_config_path() -> str:
    return os.environ.get("SIDEBARUNLOCK_CONFIG", DEFAULT_CONFIG_PATH)


@dataclass
class Config:
    """Application configuration.

    Session values (client name/version, locale, token) are read from here
    when building strategy payloads.
    """

    layout: Layout = Layout.DESKTOP
    client_name: str | None = None
    client_version: str | None = None
    hl: str | None = None
    session_token: str | None = None
    is_embed: bool = False
    is_confirmed: bool = False
    proxy_host: str = DEFAULT_PROXY_HOST
    timeout: float = DEFAULT_TIMEOUT
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str | None = None) -> "Config":
        """Load config from a JSON file, or return defaults if not found.

        SIDEBARUNLOCK_PROXY_HOST and SIDEBARUNLOCK_SESSION_TOKEN override the
        file when set.
        """
        config_path = Path(path or default_config_path()).expanduser()

        config = cls()
        if config_path.exists():
            try:
                data = json.loads(config_path.read_text())
                config = cls(
                    layout=Layout(data.get("layout", "desktop")),
                    client_name=data.get("client_name"),
                    client_version=data.get("client_version"),
                    hl=data.get("hl"),
                    session_token=data.get("session_token"),
                    is_embed=bool(data.get("is_embed", False)),
                    is_confirmed=bool(data.get("is_confirmed", False)),
                    proxy_host=data.get("proxy_host", DEFAULT_PROXY_HOST),
                    timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
                    extra=data.get("extra", {}),
                )
            except (json.JSONDecodeError, KeyError, ValueError, TypeError):
                config = cls()

        if os.environ.get("SIDEBARUNLOCK_PROXY_HOST"):
            config.proxy_host = os.environ["SIDEBARUNLOCK_PROXY_HOST"]
        if os.environ.get("SIDEBARUNLOCK_SESSION_TOKEN"):
            config.session_token = os.environ["SIDEBARUNLOCK_SESSION_TOKEN"]
        return config

    def save(self, path: str | None = None) -> None:
        """Save config to a JSON file."""
        config_path = Path(path or default_config_path()).expanduser()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(self.to_dict(), indent=2))

    def to_dict(self) -> dict[str, Any]:
        return {
            "layout": self.layout.value,
            "client_name": self.client_name,
            "client_version": self.client_version,
            "hl": self.hl,
            "session_token": self.session_token,
            "is_embed": self.is_embed,
            "is_confirmed": self.is_confirmed,
            "proxy_host": self.proxy_host,
            "timeout": self.timeout,
            "extra": self.extra,
        }

    def session_context(self) -> SessionContext:
        """Build the session context, filling in default client values."""
        return SessionContext(
            client_name=self.client_name or DEFAULT_CLIENT_NAME,
            client_version=self.client_version or DEFAULT_CLIENT_VERSION,
            hl=self.hl,
            session_token=self.session_token,
            is_embed=self.is_embed,
            is_confirmed=self.is_confirmed,
            layout=self.layout,
        )
