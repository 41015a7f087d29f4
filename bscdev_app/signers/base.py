"""Base classes for signing identity providers."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

import structlog

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


@dataclass(frozen=True)
class Signer:
    """Public side of a signing identity."""
    address: str

    def __str__(self) -> str:
        return self.address


class SignerProvider(ABC):
    """Base class for signing identity providers."""

    def __init__(self, network: str):
        self.network = network
        self.logger = structlog.get_logger(f"signers.{self.kind}").bind(network=network)

    @property
    def kind(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def get_signers(self) -> list[Signer]:
        """
        Enumerate the signing identities available on the network.

        Returns:
            Signers in provider order; empty when none are configured
        """
        pass
