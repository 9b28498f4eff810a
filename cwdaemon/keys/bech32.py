"""Bech32 encoding and decoding, with 8-bit/5-bit regrouping."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_REV = {char: value for value, char in enumerate(CHARSET)}

_BECH32_CONST = 1
_BECH32M_CONST = 0x2BC830A3
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_CHECKSUM_LENGTH = 6


class Bech32Error(ValueError):
    """A bech32 string or its data could not be encoded or decoded."""


def _polymod(values: Iterable[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _check_hrp(hrp: str) -> str:
    if not 1 <= len(hrp) <= 83:
        raise Bech32Error("invalid human-readable part length")
    has_lower = has_upper = False
    for char in hrp:
        code = ord(char)
        if not 33 <= code <= 126:
            raise Bech32Error(f"invalid character {char!r} in human-readable part")
        has_lower |= char.islower()
        has_upper |= char.isupper()
    if has_lower and has_upper:
        raise Bech32Error("mixed case in human-readable part")
    return hrp.lower()


def _convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out: list[int] = []
    max_value = (1 << to_bits) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise Bech32Error(f"value {value} does not fit in {from_bits} bits")
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & max_value)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & max_value)
    elif bits >= from_bits or (acc << (to_bits - bits)) & max_value:
        raise Bech32Error("invalid padding")
    return out


def to_base32(data: bytes) -> list[int]:
    """Regroup bytes into 5-bit words, zero-padding the last one."""
    return _convert_bits(data, 8, 5, pad=True)


def from_base32(words: Iterable[int]) -> bytes:
    """Regroup 5-bit words into bytes; the padding must be short and zero."""
    return bytes(_convert_bits(words, 5, 8, pad=False))


def encode(hrp: str, data: Sequence[int]) -> str:
    """Encode 5-bit words under ``hrp`` with a Bech32 checksum."""
    hrp = _check_hrp(hrp)
    words = list(data)
    for word in words:
        if not 0 <= word < 32:
            raise Bech32Error(f"value {word} is not a 5-bit word")
    values = _hrp_expand(hrp) + words
    polymod = _polymod(values + [0] * _CHECKSUM_LENGTH) ^ _BECH32_CONST
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(_CHECKSUM_LENGTH)]
    return hrp + "1" + "".join(CHARSET[word] for word in words + checksum)


def decode(bech: str) -> tuple[str, list[int]]:
    """Decode a Bech32 or Bech32m string into its lower-case hrp and 5-bit words."""
    if len(bech) < 8:
        raise Bech32Error("invalid length")
    separator = bech.rfind("1")
    if separator == -1:
        raise Bech32Error("missing separator")
    hrp, data_part = bech[:separator], bech[separator + 1 :]
    if not hrp or len(data_part) < _CHECKSUM_LENGTH:
        raise Bech32Error("invalid length")

    hrp = _check_hrp(hrp)
    has_lower = any(c.islower() for c in bech)
    has_upper = any(c.isupper() for c in bech)
    if has_lower and has_upper:
        raise Bech32Error("mixed case")

    words = []
    for char in data_part.lower():
        if char not in _CHARSET_REV:
            raise Bech32Error(f"invalid character {char!r}")
        words.append(_CHARSET_REV[char])

    if _polymod(_hrp_expand(hrp) + words) not in (_BECH32_CONST, _BECH32M_CONST):
        raise Bech32Error("invalid checksum")
    return hrp, words[:-_CHECKSUM_LENGTH]