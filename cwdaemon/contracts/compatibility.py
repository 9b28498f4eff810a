"""A small contract with two messages and two queries, kept for interface compatibility."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from cwdaemon.contracts.common import MessageInfo, Response, StdError, Storage, to_json_binary


@dataclass(frozen=True)
class InstantiateMsg:
    """Instantiation takes no parameters."""


@dataclass(frozen=True)
class FirstMessage:
    """Always succeeds."""


@dataclass(frozen=True)
class SecondMessage:
    """Always succeeds; funds may be attached."""

    t: str


ExecuteMsg = Union[FirstMessage, SecondMessage]


@dataclass(frozen=True)
class FirstQuery:
    """Answers with a fixed string."""


@dataclass(frozen=True)
class SecondQuery:
    """Answers with a fixed number."""

    t: str


QueryMsg = Union[FirstQuery, SecondQuery]


@dataclass(frozen=True)
class MigrateMsg:
    """Migration succeeds only when ``t`` is ``"success"``."""

    t: str


def instantiate(storage: Storage, env: Any, info: MessageInfo, msg: InstantiateMsg) -> Response:
    """Instantiate without touching storage."""
    return Response().add_attribute("action", "instantiate")


def execute(storage: Storage, env: Any, info: MessageInfo, msg: ExecuteMsg) -> Response:
    """Answer an execute message."""
    match msg:
        case FirstMessage() | SecondMessage():
            return Response().add_attribute("action", "first message passed")
    raise StdError(f"unknown execute message {msg!r}")


def query(storage: Storage, env: Any, msg: QueryMsg) -> bytes:
    """Answer a query with JSON bytes."""
    match msg:
        case FirstQuery():
            return to_json_binary("first query passed")
        case SecondQuery():
            return to_json_binary(89)
    raise StdError(f"unknown query message {msg!r}")


def migrate(storage: Storage, env: Any, msg: MigrateMsg) -> Response:
    """Succeed only for ``t == "success"``."""
    if msg.t == "success":
        return Response()
    raise StdError("migrate endpoint reached but no test implementation")