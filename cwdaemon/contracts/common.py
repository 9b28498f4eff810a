"""Building blocks shared by the contracts: coins, responses, JSON and cw2 versioning."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any

Storage = MutableMapping[bytes, bytes]

CONTRACT_INFO_KEY = b"contract_info"
_UINT128_LIMIT = 1 << 128


class StdError(Exception):
    """A generic error raised by a contract or its storage helpers."""

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(f"Generic error: {msg}")


@dataclass(frozen=True)
class Coin:
    """An amount of a single denomination."""

    amount: int
    denom: str

    def __post_init__(self) -> None:
        if not 0 <= self.amount < _UINT128_LIMIT:
            raise ValueError(f"coin amount {self.amount} does not fit in 128 bits")


@dataclass
class MessageInfo:
    """Who sent a message and what funds came with it."""

    sender: str
    funds: list[Coin] = field(default_factory=list)


@dataclass
class Response:
    """The outcome of a contract entry point."""

    messages: list[Any] = field(default_factory=list)
    attributes: list[tuple[str, str]] = field(default_factory=list)
    data: bytes | None = None

    def add_attribute(self, key: str, value: object) -> Response:
        """Append a key/value attribute and return this response."""
        self.attributes.append((str(key), str(value)))
        return self


@dataclass(frozen=True)
class ContractVersion:
    """The name and version a contract records about itself."""

    contract: str
    version: str


def coins(amount: int, denom: str) -> list[Coin]:
    """A list holding one coin."""
    return [Coin(amount, denom)]


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    raise TypeError(f"object of type {type(value).__name__} is not JSON serialisable")


def to_json_binary(value: Any) -> bytes:
    """Serialise a value to compact JSON bytes."""
    try:
        text = json.dumps(
            value, default=_json_default, separators=(",", ":"), ensure_ascii=False
        )
    except (TypeError, ValueError) as exc:
        raise StdError(f"Error serializing type: {exc}") from exc
    return text.encode("utf-8")


def from_json(data: bytes | str) -> Any:
    """Parse JSON bytes or text."""
    try:
        return json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise StdError(f"Error parsing into type: {exc}") from exc


def set_contract_version(storage: Storage, contract: str, version: str) -> None:
    """Record the contract name and version in storage."""
    storage[CONTRACT_INFO_KEY] = to_json_binary(ContractVersion(contract, version))


def get_contract_version(storage: Storage) -> ContractVersion:
    """Read back the recorded contract name and version."""
    raw = storage.get(CONTRACT_INFO_KEY)
    if raw is None:
        raise StdError("ContractVersion not found")
    value = from_json(raw)
    try:
        return ContractVersion(contract=value["contract"], version=value["version"])
    except (KeyError, TypeError) as exc:
        raise StdError(f"Error parsing into type ContractVersion: {exc}") from exc