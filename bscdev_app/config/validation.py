"""Configuration validation utilities."""

import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from .defaults import REMOTE_ACCOUNTS
from .secrets import SIGNING_SECRETS

VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates raw (dict) configuration before it is turned into profiles."""

    @staticmethod
    def validate_compilers(compilers: Any) -> list[ValidationError]:
        """Validate the compiler profile list."""
        errors = []

        if not isinstance(compilers, list):
            return [ValidationError(
                field="compilers",
                message="Must be a list of compiler profiles",
                value=compilers
            )]

        seen = set()
        for index, compiler in enumerate(compilers):
            prefix = f"compilers[{index}]"

            if not isinstance(compiler, dict):
                errors.append(ValidationError(
                    field=prefix,
                    message="Must be a mapping",
                    value=compiler
                ))
                continue

            # Validate version
            version = compiler.get("version")
            if not isinstance(version, str) or not VERSION_PATTERN.match(version):
                errors.append(ValidationError(
                    field=f"{prefix}.version",
                    message="Must be a MAJOR.MINOR.PATCH version string",
                    value=version
                ))
            elif version in seen:
                errors.append(ValidationError(
                    field=f"{prefix}.version",
                    message="Duplicate compiler version",
                    value=version
                ))
            else:
                seen.add(version)

            optimizer = compiler.get("optimizer", {})
            if not isinstance(optimizer, dict):
                errors.append(ValidationError(
                    field=f"{prefix}.optimizer",
                    message="Must be a mapping",
                    value=optimizer
                ))
                continue

            # Validate optimizer.enabled
            if "enabled" in optimizer and not isinstance(optimizer["enabled"], bool):
                errors.append(ValidationError(
                    field=f"{prefix}.optimizer.enabled",
                    message="Must be a boolean",
                    value=optimizer["enabled"]
                ))

            # Validate optimizer.runs
            if "runs" in optimizer:
                value = optimizer["runs"]
                if not _is_int(value) or value < 0:
                    errors.append(ValidationError(
                        field=f"{prefix}.optimizer.runs",
                        message="Must be a non-negative integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_network(name: str, params: Any) -> list[ValidationError]:
        """Validate a single network profile."""
        errors = []
        prefix = f"networks.{name}"

        if not isinstance(params, dict):
            return [ValidationError(
                field=prefix,
                message="Must be a mapping",
                value=params
            )]

        # Validate url
        url = params.get("url")
        if url is not None:
            parsed = urlparse(url) if isinstance(url, str) else None
            if parsed is None or parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(ValidationError(
                    field=f"{prefix}.url",
                    message="Must be an http or https URL",
                    value=url
                ))

        # Validate chain_id
        chain_id = params.get("chain_id")
        if chain_id is not None and (not _is_int(chain_id) or chain_id <= 0):
            errors.append(ValidationError(
                field=f"{prefix}.chain_id",
                message="Must be a positive integer",
                value=chain_id
            ))

        # Validate gas_price
        gas_price = params.get("gas_price")
        if gas_price is not None and gas_price != "auto":
            if not _is_int(gas_price) or gas_price <= 0:
                errors.append(ValidationError(
                    field=f"{prefix}.gas_price",
                    message="Must be a positive integer or 'auto'",
                    value=gas_price
                ))

        # Validate accounts
        accounts = params.get("accounts", [])
        if accounts != REMOTE_ACCOUNTS:
            if not isinstance(accounts, list) or not all(isinstance(a, str) for a in accounts):
                errors.append(ValidationError(
                    field=f"{prefix}.accounts",
                    message=f"Must be a list of private keys or '{REMOTE_ACCOUNTS}'",
                    # never echo key material
                    value=type(accounts).__name__
                ))

        # Validate secret binding
        secret = params.get("secret")
        if secret is not None and secret not in SIGNING_SECRETS:
            errors.append(ValidationError(
                field=f"{prefix}.secret",
                message=f"Must be one of {', '.join(SIGNING_SECRETS)}",
                value=secret
            ))

        return errors

    @staticmethod
    def validate_networks(networks: Any) -> list[ValidationError]:
        """Validate all network profiles."""
        if not isinstance(networks, dict) or not networks:
            return [ValidationError(
                field="networks",
                message="Must be a non-empty mapping of network profiles",
                value=networks
            )]

        errors = []
        for name, params in networks.items():
            errors.extend(ConfigValidator.validate_network(name, params))
        return errors

    @staticmethod
    def validate_verification(params: Any) -> list[ValidationError]:
        """Validate verification service settings."""
        if not isinstance(params, dict):
            return [ValidationError(
                field="verification",
                message="Must be a mapping",
                value=params
            )]

        api_key = params.get("api_key")
        if api_key is not None and not isinstance(api_key, str):
            return [ValidationError(
                field="verification.api_key",
                message="Must be a string",
                value=type(api_key).__name__
            )]
        return []

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        errors.extend(ConfigValidator.validate_compilers(config.get("compilers")))
        errors.extend(ConfigValidator.validate_networks(config.get("networks")))

        if "verification" in config:
            errors.extend(ConfigValidator.validate_verification(config["verification"]))

        default_network = config.get("default_network")
        networks = config.get("networks")
        if (not isinstance(default_network, str) or not isinstance(networks, dict)
                or default_network not in networks):
            errors.append(ValidationError(
                field="default_network",
                message="Must name a declared network",
                value=default_network
            ))

        return errors
