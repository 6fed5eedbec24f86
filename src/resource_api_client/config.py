"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

SUPPORTED_PROTOCOLS = ("http", "https")


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """httpx timeout settings applied to every connection."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class ResourceClientConfig:
    """Runtime configuration for the resource client.

    ``path_prefix`` is prepended verbatim to every resource path; slashes are
    not normalized.
    """

    hostname: str = ""
    protocol: str = "https"
    port: int = 443
    path_prefix: str = "/"
    secret: str | None = field(default=None, repr=False)
    user_agent: str = "resource-api-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.hostname}:{self.port}{self.path_prefix}"

    def validate(self) -> None:
        if not self.hostname:
            raise ValueError("hostname must not be empty")
        if self.protocol not in SUPPORTED_PROTOCOLS:
            raise ValueError(f"protocol must be one of {', '.join(SUPPORTED_PROTOCOLS)}")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValueError("port must be int")
        if not 0 < self.port < 65536:
            raise ValueError("port must be in 1..65535")
        if not isinstance(self.path_prefix, str):
            raise ValueError("path_prefix must be str")
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "ResourceClientConfig",
]
