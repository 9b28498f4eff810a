"""A contract whose entry points answer each message in a fixed, known way."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from cwdaemon.contracts.common import (
    MessageInfo,
    Response,
    StdError,
    Storage,
    set_contract_version,
    to_json_binary,
)

CONTRACT_NAME = "mock-contract"
CONTRACT_VERSION = "0"

_U64_LIMIT = 1 << 64
_U128_LIMIT = 1 << 128


def _check_unsigned(value: int, limit: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < limit:
        raise ValueError(f"{what} {value!r} is out of range")


@dataclass(frozen=True)
class InstantiateMsg:
    """Instantiation takes no parameters."""


@dataclass(frozen=True)
class FirstMessage:
    """Always succeeds."""


@dataclass(frozen=True)
class SecondMessage:
    """Always fails."""

    t: Any = ""


@dataclass(frozen=True)
class ThirdMessage:
    """Always succeeds."""

    t: Any = ""


@dataclass(frozen=True)
class FourthMessage:
    """Always succeeds."""


@dataclass(frozen=True)
class FifthMessage:
    """Succeeds only when funds are sent."""


@dataclass(frozen=True)
class SixthMessage:
    """Always succeeds."""

    number: int
    text: str

    def __post_init__(self) -> None:
        _check_unsigned(self.number, _U64_LIMIT, "number")


@dataclass(frozen=True)
class SeventhMessage:
    """Checks the first sent coin against the given amount and denomination."""

    amount: int
    denom: str

    def __post_init__(self) -> None:
        _check_unsigned(self.amount, _U128_LIMIT, "amount")


ExecuteMsg = Union[
    FirstMessage,
    SecondMessage,
    ThirdMessage,
    FourthMessage,
    FifthMessage,
    SixthMessage,
    SeventhMessage,
]


@dataclass(frozen=True)
class FirstQuery:
    """Answers with a fixed string."""


@dataclass(frozen=True)
class SecondQuery:
    """Always fails."""

    t: Any = ""


@dataclass(frozen=True)
class ThirdQuery:
    """Answers with a fixed string."""

    t: Any = ""


@dataclass(frozen=True)
class FourthQuery:
    """Answers with a fixed number."""

    number: int
    text: str

    def __post_init__(self) -> None:
        _check_unsigned(self.number, _U64_LIMIT, "number")


QueryMsg = Union[FirstQuery, SecondQuery, ThirdQuery, FourthQuery]


@dataclass(frozen=True)
class MigrateMsg:
    """Migration succeeds only when ``t`` is ``"success"``."""

    t: str


def _action(name: str) -> Response:
    return Response().add_attribute("action", name)


def instantiate(storage: Storage, env: Any, info: MessageInfo, msg: InstantiateMsg) -> Response:
    """Record the contract version."""
    set_contract_version(storage, CONTRACT_NAME, CONTRACT_VERSION)
    return _action("instantiate")


def execute(storage: Storage, env: Any, info: MessageInfo, msg: ExecuteMsg) -> Response:
    """Answer an execute message."""
    match msg:
        case FirstMessage():
            return _action("first message passed")
        case SecondMessage():
            raise StdError("Second Message Failed")
        case ThirdMessage():
            return _action("third message passed")
        case FourthMessage():
            return _action("fourth message passed")
        case FifthMessage():
            if not info.funds:
                raise StdError("Coins missing")
            return _action("fourth message passed")
        case SixthMessage():
            return _action("sixth message passed")
        case SeventhMessage(amount=amount, denom=denom):
            if not info.funds:
                raise StdError("index out of bounds: no funds sent")
            sent = info.funds[0]
            if sent.amount != amount and sent.denom != denom:
                raise StdError("Coins don't match message")
            return _action("fourth message passed")
    raise StdError(f"unknown execute message {msg!r}")


def query(storage: Storage, env: Any, msg: QueryMsg) -> bytes:
    """Answer a query with JSON bytes."""
    match msg:
        case FirstQuery():
            return to_json_binary("first query passed")
        case SecondQuery():
            raise StdError("Query not available")
        case ThirdQuery():
            return to_json_binary("third query passed")
        case FourthQuery():
            return to_json_binary(4)
    raise StdError(f"unknown query message {msg!r}")


def migrate(storage: Storage, env: Any, msg: MigrateMsg) -> Response:
    """Succeed only for ``t == "success"``."""
    if msg.t == "success":
        return Response()
    raise StdError("migrate endpoint reached but no test implementation")