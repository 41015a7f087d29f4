"""Configuration loader with 3-tier parameter precedence."""

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import structlog
import yaml

from ..errors import ConfigurationError, ConfigValidationError
from .defaults import (
    DEFAULT_OPTIMIZER_RUNS,
    REMOTE_ACCOUNTS,
    CompilerProfile,
    NetworkProfile,
    OptimizerSettings,
    ProjectConfig,
    VerificationConfig,
    get_default_config,
)
from .secrets import DEFAULT_SECRETS_FILE, SIGNING_SECRETS, Secrets, load_secrets
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

PROJECT_FILE = "bscdev.yaml"
REDACTED = "<redacted>"


def accounts_for(secret: Optional[str]) -> list[str]:
    """Signer list for a network bound to ``secret``: ``[secret]`` or ``[]``."""
    return [secret] if secret else []


def config_to_dict(config: ProjectConfig, redact: bool = False) -> dict[str, Any]:
    """Convert a ProjectConfig to plain data, optionally hiding secret values."""
    networks = {}
    for name, network in config.networks.items():
        if network.remote_accounts:
            accounts: Any = REMOTE_ACCOUNTS
        elif redact:
            accounts = [REDACTED] * len(network.accounts)
        else:
            accounts = list(network.accounts)

        networks[name] = {
            "url": network.url,
            "chain_id": network.chain_id,
            "gas_price": network.gas_price,
            "accounts": accounts,
            "secret": network.secret,
        }

    api_key = config.verification.api_key
    if redact and api_key:
        api_key = REDACTED

    return {
        "default_network": config.default_network,
        "compilers": [
            {
                "version": compiler.version,
                "optimizer": {
                    "enabled": compiler.optimizer.enabled,
                    "runs": compiler.optimizer.runs,
                },
            }
            for compiler in config.compilers
        ],
        "networks": networks,
        "verification": {"api_key": api_key},
    }


def config_from_dict(data: dict[str, Any]) -> ProjectConfig:
    """Build a ProjectConfig from already validated plain data."""
    compilers = []
    for entry in data["compilers"]:
        optimizer = entry.get("optimizer") or {}
        compilers.append(CompilerProfile(
            version=entry["version"],
            optimizer=OptimizerSettings(
                enabled=optimizer.get("enabled", True),
                runs=optimizer.get("runs", DEFAULT_OPTIMIZER_RUNS),
            ),
        ))

    networks = {}
    for name, params in data["networks"].items():
        accounts = params.get("accounts") or []
        remote = accounts == REMOTE_ACCOUNTS
        networks[name] = NetworkProfile(
            name=name,
            url=params.get("url"),
            chain_id=params.get("chain_id"),
            gas_price=params.get("gas_price"),
            accounts=() if remote else tuple(accounts),
            secret=params.get("secret"),
            remote_accounts=remote,
        )

    verification = data.get("verification") or {}

    return ProjectConfig(
        default_network=data["default_network"],
        compilers=tuple(compilers),
        networks=networks,
        verification=VerificationConfig(api_key=verification.get("api_key")),
    )


def _check(config: dict[str, Any], source: str) -> None:
    errors = ConfigValidator.validate_config(config)
    if errors:
        for error in errors:
            logger.error(
                "Invalid configuration value",
                source=source,
                field=error.field,
                message=error.message,
            )
        raise ConfigValidationError(
            f"Configuration from {source} has {len(errors)} error(s)",
            errors=errors,
        )


def dump_config(config: ProjectConfig, path: Union[str, Path], redact: bool = False) -> None:
    """Write a ProjectConfig to a YAML file."""
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config_to_dict(config, redact=redact), f, sort_keys=False)


def load_config_file(path: Union[str, Path]) -> ProjectConfig:
    """Read a complete ProjectConfig previously written by ``dump_config``."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} does not contain a configuration mapping")

    _check(data, str(path))
    return config_from_dict(data)


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: ProjectConfig
    secrets_path: Path

    @classmethod
    def create(
        cls,
        config_dir: Optional[Union[str, Path]] = None,
        secrets_path: Optional[Union[str, Path]] = None,
    ) -> "ConfigLoader":
        """Create a ConfigLoader instance rooted at the project directory."""
        config_dir = Path(config_dir) if config_dir is not None else Path.cwd()
        secrets_path = Path(secrets_path) if secrets_path is not None else config_dir / DEFAULT_SECRETS_FILE

        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
            secrets_path=secrets_path,
        )

    def load_project_file(self) -> dict[str, Any]:
        """Load project-level overrides from the project file, if there is one."""
        project_file = self.config_dir / PROJECT_FILE

        if not project_file.exists():
            return {}

        try:
            with open(project_file, encoding="utf-8") as f:
                project_config = yaml.safe_load(f)
        except UnicodeDecodeError as e:
            raise ConfigurationError(
                f"{project_file} is not valid UTF-8",
                context={"path": str(project_file)},
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Cannot parse {project_file}: {e}",
                context={"path": str(project_file)},
            ) from e

        if project_config is None:
            return {}
        if not isinstance(project_config, dict):
            raise ConfigurationError(
                f"{project_file} must contain a mapping",
                context={"path": str(project_file)},
            )

        logger.debug("Project file loaded", path=str(project_file))
        return project_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Project file (bscdev.yaml)
        3. Built-in defaults (lowest priority)
        """
        config = config_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_project_file())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(
        self,
        overrides: Optional[dict[str, Any]] = None,
        secrets: Optional[Secrets] = None,
    ) -> ProjectConfig:
        """Merge, inject secrets, validate and build the project configuration."""
        if secrets is None:
            secrets = load_secrets(self.secrets_path)

        config = self.apply_secrets(self.merge_config(overrides), secrets)
        _check(config, str(self.config_dir))

        project = config_from_dict(config)
        logger.info(
            "Configuration loaded",
            default_network=project.default_network,
            networks=list(project.networks),
            compilers=project.compiler_versions,
        )
        return project

    @staticmethod
    def apply_secrets(config: dict[str, Any], secrets: Secrets) -> dict[str, Any]:
        """Fill signer lists and the verification key from secrets."""
        result = copy.deepcopy(config)

        networks = result.get("networks")
        if isinstance(networks, dict):
            for name, params in networks.items():
                if not isinstance(params, dict):
                    continue
                secret_name = params.get("secret")
                if secret_name not in SIGNING_SECRETS:
                    continue
                accounts = params.get("accounts")
                if accounts == REMOTE_ACCOUNTS:
                    continue
                # explicitly configured keys beat the secret binding
                if isinstance(accounts, list) and accounts:
                    logger.debug("Using explicit signing keys", network=name, count=len(accounts))
                    continue
                params["accounts"] = accounts_for(secrets.get(secret_name))
                if not params["accounts"]:
                    logger.info("No signing key configured", network=name, secret=secret_name)

        if secrets.api_key:
            verification = result.get("verification")
            if not isinstance(verification, dict):
                verification = {}
            result["verification"] = {**verification, "api_key": secrets.api_key}

        return result

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
