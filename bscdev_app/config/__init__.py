"""
Configuration module.

Immutable compiler and network profiles, secrets loading, and the
3-tier configuration loader.
"""
