"""Signers derived from locally configured private keys."""

from typing import Iterable

from eth_account import Account

from ..errors import SignerProviderError
from .base import Signer, SignerProvider


def _normalize_key(key: str) -> str:
    key = key.strip()
    if not key.startswith(("0x", "0X")):
        key = "0x" + key
    return key


class LocalKeySigners(SignerProvider):
    """Derives addresses from private keys held in the configuration."""

    def __init__(self, network: str, keys: Iterable[str]):
        super().__init__(network)
        self._keys = tuple(keys)

    async def get_signers(self) -> list[Signer]:
        signers = []
        for index, key in enumerate(self._keys):
            try:
                account = Account.from_key(_normalize_key(key))
            except Exception as e:
                # the exception text may contain the key, keep it out of the message
                raise SignerProviderError(
                    f"Signing key #{index} for network '{self.network}' is not a valid private key",
                    network=self.network,
                    provider=self.kind,
                ) from e
            signers.append(Signer(address=account.address))

        self.logger.debug("Local signers derived", count=len(signers))
        return signers
