"""Audit Entra ID app registration secrets and certificates for expiry."""

__version__ = "1.0.0"
