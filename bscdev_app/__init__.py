"""
bscdev - Smart-contract development environment configuration

Declares compiler profiles, BNB Smart Chain network profiles and the
contract-verification API key, and ships a small task runner whose
``accounts`` task prints the signing identities of the active network.
"""

__version__ = "0.1.0"
__author__ = "bscdev Team"
