"""A counter contract: an owner-resettable count anyone may increment."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from cwdaemon.contracts.common import (
    MessageInfo,
    Response,
    StdError,
    Storage,
    from_json,
    set_contract_version,
    to_json_binary,
)

CONTRACT_NAME = "crates.io:counter"
CONTRACT_VERSION = "0.1.0"
CONTRACT_ID = "counter_contract"

_STATE_KEY = b"state"
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _check_i32(value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"count {value} does not fit in 32 bits")
    return value


class ContractError(Exception):
    """Base class of the counter's own errors."""


class Unauthorized(ContractError):
    """The sender may not perform this action."""

    def __init__(self) -> None:
        super().__init__("Unauthorized")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unauthorized)

    def __hash__(self) -> int:
        return hash(Unauthorized)


class CustomError(ContractError):
    """An error carrying a free-form value."""

    def __init__(self, val: str) -> None:
        self.val = val
        super().__init__(f"Custom Error val: {json.dumps(val)}")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CustomError) and other.val == self.val

    def __hash__(self) -> int:
        return hash((CustomError, self.val))


@dataclass(frozen=True)
class InstantiateMsg:
    """Start the counter at ``count``."""

    count: int

    def __post_init__(self) -> None:
        _check_i32(self.count)


@dataclass(frozen=True)
class Increment:
    """Increment the count by one."""


@dataclass(frozen=True)
class Reset:
    """Set the count to a new value; owner only."""

    count: int

    def __post_init__(self) -> None:
        _check_i32(self.count)


ExecuteMsg = Union[Increment, Reset]


@dataclass(frozen=True)
class GetCount:
    """Ask for the current count."""


QueryMsg = GetCount


@dataclass(frozen=True)
class GetCountResponse:
    """The current count."""

    count: int


@dataclass(frozen=True)
class MigrateMsg:
    """Migration message."""

    t: str


@dataclass
class State:
    """What the counter keeps in storage."""

    count: int
    owner: str


def _load_state(storage: Storage) -> State:
    raw = storage.get(_STATE_KEY)
    if raw is None:
        raise StdError("State not found")
    value = from_json(raw)
    try:
        return State(count=value["count"], owner=value["owner"])
    except (KeyError, TypeError) as exc:
        raise StdError(f"Error parsing into type State: {exc}") from exc


def _save_state(storage: Storage, state: State) -> None:
    storage[_STATE_KEY] = to_json_binary(state)


def instantiate(storage: Storage, env: Any, info: MessageInfo, msg: InstantiateMsg) -> Response:
    """Store the initial count with the sender as owner."""
    state = State(count=msg.count, owner=info.sender)
    set_contract_version(storage, CONTRACT_NAME, CONTRACT_VERSION)
    _save_state(storage, state)
    return (
        Response()
        .add_attribute("method", "instantiate")
        .add_attribute("owner", info.sender)
        .add_attribute("count", msg.count)
    )


def execute(storage: Storage, env: Any, info: MessageInfo, msg: ExecuteMsg) -> Response:
    """Dispatch an execute message."""
    match msg:
        case Increment():
            return increment(storage)
        case Reset(count=new_count):
            return reset(storage, info, new_count)
    raise StdError(f"unknown execute message {msg!r}")


def query(storage: Storage, env: Any, msg: QueryMsg) -> bytes:
    """Answer a query with JSON bytes."""
    match msg:
        case GetCount():
            return to_json_binary(count(storage))
    raise StdError(f"unknown query message {msg!r}")


def migrate(storage: Storage, env: Any, msg: MigrateMsg) -> Response:
    """Accept any migration."""
    return Response().add_attribute("action", "migrate")


def increment(storage: Storage) -> Response:
    """Add one to the stored count."""
    state = _load_state(storage)
    if state.count >= _I32_MAX:
        raise StdError("attempt to add with overflow")
    state.count += 1
    _save_state(storage, state)
    return Response().add_attribute("action", "increment")


def reset(storage: Storage, info: MessageInfo, count: int) -> Response:
    """Set the count, provided the sender is the owner."""
    _check_i32(count)
    state = _load_state(storage)
    if info.sender != state.owner:
        raise Unauthorized()
    state.count = count
    _save_state(storage, state)
    return Response().add_attribute("action", "reset")


def count(storage: Storage) -> GetCountResponse:
    """The stored count."""
    return GetCountResponse(count=_load_state(storage).count)