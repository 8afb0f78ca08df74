"""vaultlinks - link target extraction for markdown note vaults."""

__version__ = "0.1.0"
