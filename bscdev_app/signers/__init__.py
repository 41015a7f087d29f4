"""
Signing identity providers.

A provider enumerates the signing identities available on one network.
Local keys are turned into addresses offline; a development node can be
asked for the accounts it manages itself.
"""
from .base import Signer, SignerProvider
from .local import LocalKeySigners
from .remote import RemoteNodeSigners
from .selection import provider_for

__all__ = [
    "Signer",
    "SignerProvider",
    "LocalKeySigners",
    "RemoteNodeSigners",
    "provider_for",
]
