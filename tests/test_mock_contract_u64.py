import pytest

from cwdaemon.contracts.common import MessageInfo, StdError, coins, from_json
from cwdaemon.contracts.mock_contract import (
    FifthMessage,
    FirstMessage,
    FirstQuery,
    FourthMessage,
    FourthQuery,
    InstantiateMsg,
    MigrateMsg,
    SecondMessage,
    SecondQuery,
    SeventhMessage,
    SixthMessage,
    ThirdMessage,
    ThirdQuery,
)
from cwdaemon.contracts.mock_contract_u64 import execute, instantiate, migrate, query

SENDER = "sender"


def info(funds=None):
    return MessageInfo(SENDER, list(funds or []))


def test_instantiate_does_not_store_version():
    store = {}
    res = instantiate(store, None, info(), InstantiateMsg())
    assert res.attributes == [("action", "instantiate")]
    assert store == {}


@pytest.mark.parametrize(
    "msg, funds, expected",
    [
        (FirstMessage(), [], "first message passed"),
        (ThirdMessage(54), [], "third message passed"),
        (FourthMessage(), [], "fourth message passed"),
        (FifthMessage(), coins(156, "ujuno"), "fourth message passed"),
        (SixthMessage(45, "moneys"), [], "sixth message passed"),
        (SeventhMessage(156, "ujuno"), coins(156, "ujuno"), "fourth message passed"),
    ],
)
def test_execute_successes(msg, funds, expected):
    res = execute({}, None, info(funds), msg)
    assert res.attributes == [("action", expected)]


def test_second_message_fails():
    with pytest.raises(StdError) as exc:
        execute({}, None, info(), SecondMessage(54))
    assert exc.value.msg == "Second Message Failed"


def test_third_message_rejects_string():
    with pytest.raises(StdError):
        execute({}, None, info(), ThirdMessage("s"))


def test_queries():
    assert from_json(query({}, None, FirstQuery())) == "first query passed"
    assert from_json(query({}, None, ThirdQuery(67))) == "third query passed"


def test_second_query_fails():
    with pytest.raises(StdError) as exc:
        query({}, None, SecondQuery(45))
    assert exc.value.msg == "Query not available"


def test_fourth_query_answers_string_not_u64():
    result = from_json(query({}, None, FourthQuery(45, "moneys")))
    assert result == "fourth query passed"
    assert not isinstance(result, int)


def test_migrate():
    assert migrate({}, None, MigrateMsg("success")).attributes == []
    with pytest.raises(StdError):
        migrate({}, None, MigrateMsg("fail"))