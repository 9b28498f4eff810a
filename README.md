# cwdaemon

Two building blocks for tools that work with CosmWasm chains:

- **Bech32** – encoding and decoding of bech32 strings, with regrouping
  between bytes and 5-bit words.
- **Reference contracts** – a counter contract and a set of mock
  contracts, written as plain Python functions that run against a
  dictionary used as storage, so contract logic can be exercised without
  a chain.

The package has no dependencies beyond the standard library.

## Installation

```
pip install cwdaemon
```

Python 3.10 or later is required.

## Bech32

`cwdaemon.keys.bech32` converts between bytes and bech32 strings.

```python
from cwdaemon.keys import bech32

words = bech32.to_base32(bytes(20))
address = bech32.encode("terra", words)

hrp, decoded = bech32.decode(address)
assert hrp == "terra"
assert bech32.from_base32(decoded) == bytes(20)
```

- `to_base32(data)` regroups bytes into 5-bit words, zero-padding the
  last word.
- `from_base32(words)` regroups 5-bit words back into bytes; leftover
  padding must be shorter than a byte and all zero.
- `encode(hrp, data)` writes the lower-case human-readable part, the
  separator `1`, the words and a Bech32 checksum.
- `decode(bech)` returns the lower-case human-readable part and the data
  words without the checksum. It accepts a Bech32 or a Bech32m checksum
  and rejects mixed case, unknown characters and strings shorter than
  eight characters.

Malformed input raises `bech32.Bech32Error`, a subclass of `ValueError`.
The alphabet is available as `bech32.CHARSET`.

## Reference contracts

Every contract in `cwdaemon.contracts` offers the same four entry points:

```python
instantiate(storage, env, info, msg)
execute(storage, env, info, msg)
query(storage, env, msg)   # returns JSON bytes
migrate(storage, env, msg)
```

`storage` is any mutable mapping from `bytes` to `bytes`; a plain `dict`
will do. `env` is accepted for the shape of the interface and is not
read. Messages are frozen dataclasses, and failures are raised as
exceptions.

### Shared pieces

`cwdaemon.contracts.common` holds what the contracts share:

- `Coin(amount, denom)` – the amount must fit in 128 unsigned bits, or
  `ValueError` is raised; `coins(amount, denom)` returns a one-coin list.
- `MessageInfo(sender, funds)` – the sender and the coins sent along.
- `Response` – collects `messages`, `attributes` and `data`;
  `add_attribute(key, value)` appends a pair of strings and returns the
  response, so calls chain.
- `StdError(msg)` – the generic contract error; its text reads
  `Generic error: <msg>`.
- `to_json_binary(value)` and `from_json(data)` – compact JSON in and out;
  dataclasses are written as objects and bytes as lists of numbers.
- `set_contract_version(storage, contract, version)` and
  `get_contract_version(storage)` – store and read a `ContractVersion`
  under the key `b"contract_info"`.

### Counter

```python
from cwdaemon.contracts import counter
from cwdaemon.contracts.common import MessageInfo, coins, from_json

storage = {}
info = MessageInfo(sender="creator", funds=coins(1000, "earth"))

counter.instantiate(storage, None, info, counter.InstantiateMsg(count=17))
counter.execute(storage, None, info, counter.Increment())

from_json(counter.query(storage, None, counter.GetCount()))  # {"count": 18}
```

- `InstantiateMsg(count)` stores the count with the sender as owner and
  records the contract version `crates.io:counter` / `0.1.0`.
- `Increment()` adds one, for any sender.
- `Reset(count)` sets the count; any sender other than the owner gets
  `counter.Unauthorized`.
- `GetCount()` answers with a `GetCountResponse(count)`.
- `MigrateMsg(t)` is always accepted.

Counts are 32-bit signed integers; values outside that range raise
`ValueError`, and incrementing past the maximum raises `StdError`.
`increment(storage)`, `reset(storage, info, count)` and `count(storage)`
are also available directly. The error classes are `ContractError`,
`Unauthorized` and `CustomError(val)`; the stored record is `State`.

### Mock contract

`cwdaemon.contracts.mock_contract` answers each message in a fixed way:

| Message | Result |
| --- | --- |
| `FirstMessage()` | succeeds |
| `SecondMessage(t)` | raises `StdError("Second Message Failed")` |
| `ThirdMessage(t)` | succeeds |
| `FourthMessage()` | succeeds |
| `FifthMessage()` | succeeds only when funds are sent |
| `SixthMessage(number, text)` | succeeds |
| `SeventhMessage(amount, denom)` | fails unless the first coin sent matches the amount or the denomination |
| `FirstQuery()` | `"first query passed"` |
| `SecondQuery(t)` | raises `StdError("Query not available")` |
| `ThirdQuery(t)` | `"third query passed"` |
| `FourthQuery(number, text)` | `4` |

Instantiation records the version `mock-contract` / `0`. Migration with
`MigrateMsg(t="success")` succeeds; any other value raises `StdError`.

`cwdaemon.contracts.mock_contract_u64` takes the same messages but
requires `t` to be an unsigned 64-bit integer, answers `FourthQuery` with
`"fourth query passed"`, and does not record a version on instantiation.

### Compatibility contract

`cwdaemon.contracts.compatibility` has `FirstMessage()` and
`SecondMessage(t)`, both of which succeed, `FirstQuery()` answering
`"first query passed"` and `SecondQuery(t)` answering `89`, with the same
migration rule as the mock contract.

## What the package does not do

It does not connect to a chain node, build, sign or broadcast
transactions, derive addresses from public keys, verify signatures, read
configuration from environment variables, or keep a record of
deployments on disk. Contracts run only against the storage mapping
passed to them.

## Running the tests

The tests use pytest, which the `test` extra installs:

```
pip install cwdaemon[test]
pytest
```