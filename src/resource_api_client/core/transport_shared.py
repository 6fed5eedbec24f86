"""Shared httpx client defaults."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import ResourceClientConfig


def build_default_headers(config: ResourceClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: ResourceClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "is_success_status",
]
