"""Bech32 encoding and decoding."""

__all__ = ["bech32"]