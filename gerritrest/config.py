"""
Connection settings for a Gerrit server.
"""

from dataclasses import dataclass
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_base_url(url: str) -> str:
    """Return ``url`` with exactly one trailing slash."""
    return url.rstrip("/") + "/"


@dataclass(frozen=True)
class ServerConfig:
    """
    Everything the client needs to talk to one Gerrit server.

    Frozen once built. The only change allowed afterwards is switching
    ``read_only`` on with :meth:`enable_read_only`; it cannot be
    switched back off.
    """

    url: str
    username: str | None = None
    password: str | None = None
    read_only: bool = False
    debug: bool = False
    timeout: float | None = None
    # Apply the read-only gate to PUT, POST and DELETE alike and never
    # report a stale status for skipped writes
    strict_read_only: bool = False
    # Use the /a/ prefix when deleting a single branch
    authenticated_single_delete: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", normalize_base_url(self.url))

    @property
    def auth(self) -> tuple[str, str] | None:
        """Basic auth pair, or None unless both parts are set."""
        if self.username and self.password:
            return (self.username, self.password)
        return None

    def enable_read_only(self) -> None:
        object.__setattr__(self, "read_only", True)

    @classmethod
    def from_env(cls, prefix: str = "GERRIT_", **overrides: Any) -> "ServerConfig":
        """
        Build a config from ``<prefix>URL``, ``<prefix>USERNAME``,
        ``<prefix>PASSWORD``, ``<prefix>READ_ONLY``, ``<prefix>DEBUG`` and
        ``<prefix>TIMEOUT``.

        Keyword overrides that are not None win over the environment.
        Raises ValueError when no URL is available.
        """
        given = {key: value for key, value in overrides.items() if value is not None}
        return GerritSettings(_env_prefix=prefix, **given).to_config()


class GerritSettings(BaseSettings):
    """Environment-backed source for :class:`ServerConfig`."""

    model_config = SettingsConfigDict(env_prefix="GERRIT_")

    url: str | None = None
    username: str | None = None
    password: str | None = None
    read_only: bool = False
    debug: bool = False
    timeout: float | None = None
    strict_read_only: bool = False
    authenticated_single_delete: bool = False

    def to_config(self) -> ServerConfig:
        if not self.url:
            raise ValueError("no Gerrit URL given")
        return ServerConfig(**self.model_dump())
