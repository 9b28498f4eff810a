"""Bech32 encoding and reference CosmWasm contracts that run against in-memory storage."""

__version__ = "0.1.0"

__all__ = ["contracts", "keys"]