"""Unit tests for configuration validation."""

import pytest

from bscdev_app.config.defaults import get_default_config
from bscdev_app.config.loader import config_to_dict
from bscdev_app.config.validation import ConfigValidator


@pytest.fixture
def raw_config() -> dict:
    return config_to_dict(get_default_config())


class TestCompilerValidation:
    """Test suite for compiler profile validation."""

    def test_default_compilers_valid(self, raw_config) -> None:
        """Test that the default compiler list passes."""
        assert ConfigValidator.validate_compilers(raw_config["compilers"]) == []

    def test_duplicate_version(self) -> None:
        """Test that a repeated version is reported once."""
        compilers = [{"version": "0.6.12"}, {"version": "0.6.12"}]

        errors = ConfigValidator.validate_compilers(compilers)
        assert len(errors) == 1
        assert errors[0].field == "compilers[1].version"
        assert "Duplicate" in errors[0].message

    @pytest.mark.parametrize("version", ["0.8", "v0.8.6", "latest", 8])
    def test_malformed_version(self, version) -> None:
        """Test that non-semver versions are rejected."""
        errors = ConfigValidator.validate_compilers([{"version": version}])
        assert len(errors) == 1
        assert errors[0].field == "compilers[0].version"

    def test_negative_runs(self) -> None:
        """Test that negative optimizer runs are rejected."""
        errors = ConfigValidator.validate_compilers(
            [{"version": "0.8.6", "optimizer": {"enabled": True, "runs": -1}}]
        )
        assert len(errors) == 1
        assert errors[0].field == "compilers[0].optimizer.runs"
        assert "Must be a non-negative integer" in errors[0].message

    def test_zero_runs_allowed(self) -> None:
        """Test that zero optimizer runs is valid."""
        errors = ConfigValidator.validate_compilers(
            [{"version": "0.8.6", "optimizer": {"enabled": False, "runs": 0}}]
        )
        assert errors == []

    def test_invalid_enabled(self) -> None:
        """Test that a non-boolean optimizer flag is rejected."""
        errors = ConfigValidator.validate_compilers(
            [{"version": "0.8.6", "optimizer": {"enabled": "yes"}}]
        )
        assert len(errors) == 1
        assert errors[0].field == "compilers[0].optimizer.enabled"

    def test_bool_runs_rejected(self) -> None:
        """Test that True is not accepted as an integer run count."""
        errors = ConfigValidator.validate_compilers(
            [{"version": "0.8.6", "optimizer": {"runs": True}}]
        )
        assert len(errors) == 1

    def test_not_a_list(self) -> None:
        errors = ConfigValidator.validate_compilers({"version": "0.8.6"})
        assert len(errors) == 1
        assert errors[0].field == "compilers"


class TestNetworkValidation:
    """Test suite for network profile validation."""

    def test_default_networks_valid(self, raw_config) -> None:
        """Test that the default networks pass."""
        assert ConfigValidator.validate_networks(raw_config["networks"]) == []

    def test_empty_network_valid(self) -> None:
        """Test that a network with no settings at all is valid."""
        assert ConfigValidator.validate_network("localhost", {}) == []

    @pytest.mark.parametrize("url", ["ftp://example.org", "bsc-dataseed.binance.org", 42])
    def test_invalid_url(self, url) -> None:
        """Test that non-http(s) URLs are rejected."""
        errors = ConfigValidator.validate_network("testnet", {"url": url})
        assert len(errors) == 1
        assert errors[0].field == "networks.testnet.url"

    @pytest.mark.parametrize("chain_id", [0, -56, "56", 97.0])
    def test_invalid_chain_id(self, chain_id) -> None:
        """Test that chain ids must be positive integers."""
        errors = ConfigValidator.validate_network("testnet", {"chain_id": chain_id})
        assert len(errors) == 1
        assert errors[0].field == "networks.testnet.chain_id"

    def test_gas_price_auto(self) -> None:
        """Test that 'auto' is an accepted gas price."""
        assert ConfigValidator.validate_network("testnet", {"gas_price": "auto"}) == []

    def test_invalid_gas_price(self) -> None:
        """Test that a zero gas price is rejected."""
        errors = ConfigValidator.validate_network("testnet", {"gas_price": 0})
        assert len(errors) == 1
        assert "Must be a positive integer or 'auto'" in errors[0].message

    def test_remote_accounts_valid(self) -> None:
        assert ConfigValidator.validate_network("localhost", {"accounts": "remote"}) == []

    def test_invalid_accounts_do_not_echo_keys(self) -> None:
        """Test that a bad accounts value is reported without the key itself."""
        errors = ConfigValidator.validate_network("mainnet", {"accounts": "0xsecretkey"})
        assert len(errors) == 1
        assert errors[0].field == "networks.mainnet.accounts"
        assert "0xsecretkey" not in str(errors[0].value)

    def test_invalid_secret_binding(self) -> None:
        errors = ConfigValidator.validate_network("mainnet", {"secret": "api_key"})
        assert len(errors) == 1
        assert errors[0].field == "networks.mainnet.secret"

    def test_no_networks(self) -> None:
        errors = ConfigValidator.validate_networks({})
        assert len(errors) == 1
        assert errors[0].field == "networks"


class TestConfigValidation:
    """Test suite for whole-configuration validation."""

    def test_default_config_valid(self, raw_config) -> None:
        assert ConfigValidator.validate_config(raw_config) == []

    def test_unknown_default_network(self, raw_config) -> None:
        raw_config["default_network"] = "ropsten"

        errors = ConfigValidator.validate_config(raw_config)
        assert [e.field for e in errors] == ["default_network"]

    def test_non_string_api_key(self, raw_config) -> None:
        raw_config["verification"] = {"api_key": 12345}

        errors = ConfigValidator.validate_config(raw_config)
        assert [e.field for e in errors] == ["verification.api_key"]

    def test_errors_accumulate(self, raw_config) -> None:
        """Test that every problem is reported, not just the first."""
        raw_config["compilers"].append({"version": "0.8.6"})
        raw_config["networks"]["testnet"]["chain_id"] = -1
        raw_config["default_network"] = "missing"

        errors = ConfigValidator.validate_config(raw_config)
        assert len(errors) == 3
