from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from resource_api_client.config import ResourceClientConfig  # noqa: E402


@pytest.fixture
def config() -> ResourceClientConfig:
    cfg = ResourceClientConfig(hostname="api.example.test", secret="s3cret")
    cfg.validate()
    return cfg
