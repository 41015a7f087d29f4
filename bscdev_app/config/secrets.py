"""Operator-managed secrets: signing keys and the verification API key."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import structlog

from ..errors import SecretsFileError

logger = structlog.get_logger(__name__)

DEFAULT_SECRETS_FILE = "secrets.json"

# Field name -> keys accepted in secrets.json, first match wins
FILE_KEYS = {
    "private_key": ("privateKey", "private_key"),
    "private_key_test": ("privateKeyTest", "private_key_test"),
    "api_key": ("bscscanApiKey", "apiKey", "api_key"),
}

ENV_VARS = {
    "private_key": "BSCDEV_PRIVATE_KEY",
    "private_key_test": "BSCDEV_PRIVATE_KEY_TEST",
    "api_key": "BSCDEV_API_KEY",
}

SIGNING_SECRETS = ("private_key", "private_key_test")


@dataclass(frozen=True)
class Secrets:
    """Secret values, each absent (None) unless the operator supplied it."""
    private_key: Optional[str] = None
    private_key_test: Optional[str] = None
    api_key: Optional[str] = None

    def get(self, name: str) -> Optional[str]:
        if name not in FILE_KEYS:
            raise KeyError(name)
        return getattr(self, name)

    def present(self) -> list[str]:
        """Names of the secrets that were supplied."""
        return [name for name in FILE_KEYS if getattr(self, name)]

    def __repr__(self) -> str:
        shown = ", ".join(
            f"{name}={'<set>' if getattr(self, name) else None}" for name in FILE_KEYS
        )
        return f"Secrets({shown})"


def _clean(value: Any, key: str, path: Path) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SecretsFileError(
            f"Secret '{key}' must be a string",
            path=str(path),
            key=key,
        )
    value = value.strip()
    return value or None


def _read_file(path: Path) -> dict[str, Optional[str]]:
    if not path.exists():
        logger.warning("Secrets file not found, networks will have no signers", path=str(path))
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except UnicodeDecodeError as e:
        raise SecretsFileError("Secrets file is not valid UTF-8", path=str(path)) from e
    except json.JSONDecodeError as e:
        raise SecretsFileError(
            f"Secrets file is not valid JSON: {e.msg}",
            path=str(path),
        ) from e
    except OSError as e:
        raise SecretsFileError(f"Cannot read secrets file: {e}", path=str(path)) from e

    if not isinstance(raw, dict):
        raise SecretsFileError("Secrets file must contain a JSON object", path=str(path))

    values: dict[str, Optional[str]] = {}
    for name, keys in FILE_KEYS.items():
        for key in keys:
            if key in raw:
                values[name] = _clean(raw[key], key, path)
                break
    return values


def load_secrets(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Secrets:
    """
    Load secrets from a JSON file, with environment variable overrides.

    A missing file, key, or empty value leaves the secret absent. Only a file
    that exists but is malformed raises ``SecretsFileError``.
    """
    path = Path(path) if path is not None else Path.cwd() / DEFAULT_SECRETS_FILE
    environ = os.environ if environ is None else environ

    values = _read_file(path)

    for name, var in ENV_VARS.items():
        env_value = environ.get(var, "").strip()
        if env_value:
            values[name] = env_value

    secrets = Secrets(**values)
    logger.debug("Secrets loaded", path=str(path), present=secrets.present())
    return secrets
