import pytest

from cwdaemon.contracts.common import MessageInfo, StdError, coins, from_json
from cwdaemon.contracts.compatibility import (
    FirstMessage,
    FirstQuery,
    InstantiateMsg,
    MigrateMsg,
    SecondMessage,
    SecondQuery,
    execute,
    instantiate,
    migrate,
    query,
)


def test_instantiate():
    res = instantiate({}, None, MessageInfo("sender"), InstantiateMsg())
    assert res.attributes == [("action", "instantiate")]


def test_first_message():
    res = execute({}, None, MessageInfo("sender"), FirstMessage())
    assert res.attributes == [("action", "first message passed")]


def test_second_message_with_funds():
    res = execute({}, None, MessageInfo("sender", coins(156, "ujuno")), SecondMessage("s"))
    assert res.attributes == [("action", "first message passed")]


def test_first_query():
    assert from_json(query({}, None, FirstQuery())) == "first query passed"


def test_second_query():
    assert from_json(query({}, None, SecondQuery("arg"))) == 89


def test_migrate_success():
    assert migrate({}, None, MigrateMsg("success")).attributes == []


def test_migrate_failure():
    with pytest.raises(StdError) as exc:
        migrate({}, None, MigrateMsg("nope"))
    assert exc.value.msg == "migrate endpoint reached but no test implementation"