"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from bscdev_app.logging import configure_logging

# Well-known development keys and the addresses they control
KEY_A = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
ADDRESS_A = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"
KEY_B = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
ADDRESS_B = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
KEY_C = "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d"
ADDRESS_C = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


@pytest.fixture(autouse=True)
def _logging_to_stderr() -> None:
    """Keep structlog output away from stdout, which tasks write to."""
    configure_logging(level="DEBUG")


@pytest.fixture(autouse=True)
def _no_secret_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("BSCDEV_PRIVATE_KEY", "BSCDEV_PRIVATE_KEY_TEST", "BSCDEV_API_KEY"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty project directory: no bscdev.yaml, no secrets.json."""
    return tmp_path


@pytest.fixture
def write_secrets(project_dir: Path) -> Callable[[Dict[str, Any]], Path]:
    """Write a secrets.json into the project directory."""
    def _write(values: Dict[str, Any]) -> Path:
        path = project_dir / "secrets.json"
        path.write_text(json.dumps(values))
        return path
    return _write


@pytest.fixture
def write_project_file(project_dir: Path) -> Callable[[str], Path]:
    """Write a bscdev.yaml into the project directory."""
    def _write(content: str) -> Path:
        path = project_dir / "bscdev.yaml"
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def known_accounts() -> list:
    """(private key, checksummed address) pairs, in a fixed order."""
    return [(KEY_A, ADDRESS_A), (KEY_B, ADDRESS_B), (KEY_C, ADDRESS_C)]
