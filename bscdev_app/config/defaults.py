"""Default compiler and network profiles for the BSC development environment."""

from dataclasses import dataclass, field
from typing import Optional, Union

from ..errors import UnknownNetworkError

LOCALHOST_URL = "http://127.0.0.1:8545"
TESTNET_URL = "https://data-seed-prebsc-1-s1.binance.org:8545"
MAINNET_URL = "https://bsc-dataseed.binance.org"

TESTNET_CHAIN_ID = 97
MAINNET_CHAIN_ID = 56

TESTNET_GAS_PRICE = 20_000_000_000               # 20 gwei
MAINNET_GAS_PRICE = 5_000_000_000                # 5 gwei

DEFAULT_OPTIMIZER_RUNS = 200

# Compiler versions the contracts in this project are pinned to
DEFAULT_COMPILER_VERSIONS = ("0.4.18", "0.5.16", "0.6.6", "0.6.12", "0.8.6")

# Marker for networks whose node manages its own unlocked accounts
REMOTE_ACCOUNTS = "remote"


@dataclass(frozen=True)
class OptimizerSettings:
    """Compiler optimizer settings."""
    enabled: bool = True
    runs: int = DEFAULT_OPTIMIZER_RUNS


@dataclass(frozen=True)
class CompilerProfile:
    """One contract-language compiler version and its settings."""
    version: str
    optimizer: OptimizerSettings = field(default_factory=OptimizerSettings)

    @property
    def optimizer_enabled(self) -> bool:
        return self.optimizer.enabled

    @property
    def optimizer_runs(self) -> int:
        return self.optimizer.runs


@dataclass(frozen=True)
class NetworkProfile:
    """
    Named network the toolchain can talk to.

    ``accounts`` holds the signing keys for the network. It is an empty
    tuple when no key was configured, never ``None``. ``secret`` names the
    secrets entry the keys are taken from, if any.
    """
    name: str
    url: Optional[str] = None
    chain_id: Optional[int] = None
    gas_price: Optional[Union[int, str]] = None     # wei, or "auto"
    accounts: tuple[str, ...] = ()
    secret: Optional[str] = None
    remote_accounts: bool = False

    def __repr__(self) -> str:
        return (
            f"NetworkProfile(name={self.name!r}, url={self.url!r}, "
            f"chain_id={self.chain_id!r}, gas_price={self.gas_price!r}, "
            f"accounts=<{len(self.accounts)} key(s)>, secret={self.secret!r}, "
            f"remote_accounts={self.remote_accounts!r})"
        )


@dataclass(frozen=True)
class VerificationConfig:
    """Contract-verification service (BscScan) settings."""
    api_key: Optional[str] = None

    def __repr__(self) -> str:
        return f"VerificationConfig(api_key={'<set>' if self.api_key else None})"


@dataclass(frozen=True)
class ProjectConfig:
    """Complete project configuration."""
    default_network: str
    compilers: tuple[CompilerProfile, ...]
    networks: dict[str, NetworkProfile]
    verification: VerificationConfig

    def get_network(self, name: Optional[str] = None) -> NetworkProfile:
        """Return the named network, or the default network when name is None."""
        name = name or self.default_network
        try:
            return self.networks[name]
        except KeyError:
            raise UnknownNetworkError(
                f"Network '{name}' is not declared",
                network=name,
                available=sorted(self.networks),
            ) from None

    @property
    def compiler_versions(self) -> list[str]:
        return [compiler.version for compiler in self.compilers]


def get_default_compilers() -> tuple[CompilerProfile, ...]:
    """Get the default compiler profiles."""
    return tuple(CompilerProfile(version=version) for version in DEFAULT_COMPILER_VERSIONS)


def get_default_networks() -> dict[str, NetworkProfile]:
    """Get the default network profiles, without any signing keys."""
    return {
        "localhost": NetworkProfile(
            name="localhost",
            url=LOCALHOST_URL,
        ),
        "testnet": NetworkProfile(
            name="testnet",
            url=TESTNET_URL,
            chain_id=TESTNET_CHAIN_ID,
            gas_price=TESTNET_GAS_PRICE,
            secret="private_key_test",
        ),
        "mainnet": NetworkProfile(
            name="mainnet",
            url=MAINNET_URL,
            chain_id=MAINNET_CHAIN_ID,
            gas_price=MAINNET_GAS_PRICE,
            secret="private_key",
        ),
    }


def get_default_config() -> ProjectConfig:
    """Get the default configuration instance."""
    return ProjectConfig(
        default_network="localhost",
        compilers=get_default_compilers(),
        networks=get_default_networks(),
        verification=VerificationConfig(),
    )
