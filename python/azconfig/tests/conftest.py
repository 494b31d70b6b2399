"""Shared fixtures for azconfig tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

VALID_TOML = """\
location = "eastus"

[credentials]
name = "ci"
description = "CI service principal"
tenant_id = "00000000-0000-0000-0000-000000000001"
client_id = "00000000-0000-0000-0000-000000000002"
subscription_id = "00000000-0000-0000-0000-000000000003"
client_secret = "s3cr3t-value"
"""

VALID_YAML = """\
location: westeurope
credentials:
  tenant_id: "00000000-0000-0000-0000-000000000001"
  client_id: "00000000-0000-0000-0000-000000000002"
  subscription_id: "00000000-0000-0000-0000-000000000003"
  client_secret: "s3cr3t-value"
  client_options:
    cloud:
      environment: china
"""


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., str]:
    """Write ``text`` to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "config.toml") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def valid_toml_path(write_config: Callable[..., str]) -> str:
    return write_config(VALID_TOML)


@pytest.fixture
def valid_yaml_path(write_config: Callable[..., str]) -> str:
    return write_config(VALID_YAML, name="config.yaml")
