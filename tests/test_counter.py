import pytest

from cwdaemon.contracts.common import (
    ContractVersion,
    MessageInfo,
    StdError,
    coins,
    from_json,
    get_contract_version,
)
from cwdaemon.contracts.counter import (
    CONTRACT_NAME,
    CustomError,
    GetCount,
    GetCountResponse,
    Increment,
    InstantiateMsg,
    MigrateMsg,
    Reset,
    Unauthorized,
    count,
    execute,
    increment,
    instantiate,
    migrate,
    query,
    reset,
)

ENV = None


def _get_count(storage):
    return GetCountResponse(**from_json(query(storage, ENV, GetCount())))


def _setup(start=17, owner="creator"):
    storage = {}
    instantiate(storage, ENV, MessageInfo(owner, coins(2, "token")), InstantiateMsg(count=start))
    return storage


def test_proper_initialization():
    storage = {}
    info = MessageInfo("creator", coins(1000, "earth"))
    res = instantiate(storage, ENV, info, InstantiateMsg(count=17))
    assert len(res.messages) == 0
    assert _get_count(storage).count == 17


def test_instantiate_attributes_and_version():
    storage = {}
    res = instantiate(storage, ENV, MessageInfo("creator"), InstantiateMsg(count=17))
    assert res.attributes == [("method", "instantiate"), ("owner", "creator"), ("count", "17")]
    assert get_contract_version(storage).contract == CONTRACT_NAME


def test_increment():
    storage = _setup()
    execute(storage, ENV, MessageInfo("anyone", coins(2, "token")), Increment())
    assert _get_count(storage).count == 18


def test_reset():
    storage = _setup()
    with pytest.raises(Unauthorized):
        execute(storage, ENV, MessageInfo("anyone", coins(2, "token")), Reset(count=5))
    assert _get_count(storage).count == 17
    execute(storage, ENV, MessageInfo("creator", coins(2, "token")), Reset(count=5))
    assert _get_count(storage).count == 5


def test_integration_count_flow():
    storage = _setup(start=1, owner="admin")
    execute(storage, ENV, MessageInfo("user"), Increment())
    count1 = _get_count(storage)
    count2 = count(storage)
    assert count1 == count2
    assert count1.count == 2

    execute(storage, ENV, MessageInfo("admin"), Reset(count=0))
    assert count(storage).count == 0

    with pytest.raises(Unauthorized) as excinfo:
        execute(storage, ENV, MessageInfo("user"), Reset(count=0))
    assert excinfo.value == Unauthorized()


def test_direct_helpers():
    storage = _setup(start=3)
    assert increment(storage).attributes == [("action", "increment")]
    assert reset(storage, MessageInfo("creator"), 9).attributes == [("action", "reset")]
    assert count(storage) == GetCountResponse(9)


def test_query_before_instantiate_fails():
    with pytest.raises(StdError):
        query({}, ENV, GetCount())


def test_increment_overflow():
    storage = _setup(start=2**31 - 1)
    with pytest.raises(StdError):
        increment(storage)


def test_count_must_fit_i32():
    with pytest.raises(ValueError):
        InstantiateMsg(count=2**31)
    with pytest.raises(ValueError):
        Reset(count=-(2**31) - 1)


def test_migrate():
    storage = _setup()
    res = migrate(storage, ENV, MigrateMsg(t="success"))
    assert res.attributes == [("action", "migrate")]
    assert get_contract_version(storage) == ContractVersion(CONTRACT_NAME, "0.1.0")


def test_error_messages():
    assert str(Unauthorized()) == "Unauthorized"
    assert str(CustomError("oops")) == 'Custom Error val: "oops"'
    assert CustomError("a") == CustomError("a")


def test_query_json_form():
    storage = _setup()
    assert query(storage, ENV, GetCount()) == b'{"count":17}'