"""Shared helpers for client bootstrap."""

from __future__ import annotations

from .config import ResourceClientConfig
from .core.errors import ResourceValidationError


def validate_client_config(config: ResourceClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ResourceValidationError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
