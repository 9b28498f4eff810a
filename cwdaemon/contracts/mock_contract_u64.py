"""The mock contract with ``u64`` message parameters and a differently typed fourth query."""

from __future__ import annotations

from typing import Any

from cwdaemon.contracts import mock_contract
from cwdaemon.contracts.common import MessageInfo, Response, StdError, Storage, to_json_binary
from cwdaemon.contracts.mock_contract import (
    ExecuteMsg,
    FourthQuery,
    InstantiateMsg,
    MigrateMsg,
    QueryMsg,
    SecondMessage,
    SecondQuery,
    ThirdMessage,
    ThirdQuery,
)

_U64_LIMIT = 1 << 64


def _check_u64(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < _U64_LIMIT:
        raise StdError(f"Error parsing into type u64: {value!r}")


def instantiate(storage: Storage, env: Any, info: MessageInfo, msg: InstantiateMsg) -> Response:
    """Instantiate without recording a version."""
    return Response().add_attribute("action", "instantiate")


def execute(storage: Storage, env: Any, info: MessageInfo, msg: ExecuteMsg) -> Response:
    """Answer an execute message whose ``t`` parameters are u64."""
    if isinstance(msg, (SecondMessage, ThirdMessage)):
        _check_u64(msg.t)
    return mock_contract.execute(storage, env, info, msg)


def query(storage: Storage, env: Any, msg: QueryMsg) -> bytes:
    """Answer a query; the fourth query answers with a string."""
    if isinstance(msg, (SecondQuery, ThirdQuery)):
        _check_u64(msg.t)
    if isinstance(msg, FourthQuery):
        return to_json_binary("fourth query passed")
    return mock_contract.query(storage, env, msg)


def migrate(storage: Storage, env: Any, msg: MigrateMsg) -> Response:
    """Succeed only for ``t == "success"``."""
    return mock_contract.migrate(storage, env, msg)