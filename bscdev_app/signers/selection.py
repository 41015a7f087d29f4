"""Picks the signer provider for a network profile."""

from ..config.defaults import NetworkProfile
from ..errors import SignerProviderError
from .base import SignerProvider
from .local import LocalKeySigners
from .remote import RemoteNodeSigners


def provider_for(network: NetworkProfile) -> SignerProvider:
    """Return the provider matching how the network declares its accounts."""
    if network.remote_accounts:
        if not network.url:
            raise SignerProviderError(
                f"Network '{network.name}' uses node-managed accounts but has no url",
                network=network.name,
            )
        return RemoteNodeSigners(network.name, network.url)

    return LocalKeySigners(network.name, network.accounts)
