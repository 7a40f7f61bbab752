# paraledger

In-memory building blocks for a parachain ledger. The package has no dependencies outside the
standard library.

- `paraledger.primitives` holds the shared chain types. `CandidateHash` is a 32-byte hash, and
  `InboundDownwardMessage`, `InboundHrmpMessage` and `OutboundHrmpMessage` are the message
  records. Block numbers are checked against the 32-bit range.
- `paraledger.asset_types` holds the value types of an asset registry. `AssetType` is either
  `AssetType.token()` or `AssetType.pool_share(first, second)`. `AssetDetails`, `AssetMetadata`
  and `Metadata` hold the rest. The `decimals` value must fit in a byte.
- `paraledger.registry_config` holds `RegistryConfig`, `WeightInfo` and `AssetLocation`.
  `RegistryConfig` defaults to a string limit of 10, sequential ids starting at 1,000,000, native
  asset id 0 and native asset name `b"BSX"`. Every call in `WeightInfo` weighs 0. An
  `AssetLocation` with no parts is null.
- `paraledger.imbalances` holds `PositiveImbalance` and `NegativeImbalance`. They stand for funds
  created or destroyed without a matching entry, and they settle against a total-issuance mapping.
- `paraledger.combinators` holds two adapters. `Combiner` sends one key asset to a single-asset
  ledger and every other asset to a multi-asset ledger. `Mapper` shows one asset of a multi-asset
  ledger as a single-asset ledger and converts balances on the way. `DepositConsequence` and
  `WithdrawConsequence` are the result types.
- `paraledger.tokens_rpc` holds `TokensRpc`, which answers existential-deposit queries against a
  client, and `to_number_or_hex`. Failures are raised as `RpcError`.

## Install

```
pip install .
```

Add the `test` extra to get the test dependencies:

```
pip install ".[test]"
```

## Examples

Imbalances settle against a mapping of currency id to total issuance:

```python
from paraledger.imbalances import NegativeImbalance, PositiveImbalance

issuance = {}
credit = PositiveImbalance(100, "DOT", issuance)
debit = NegativeImbalance(30, "DOT", issuance)

result = credit.offset(debit)      # both are consumed
remainder = result.same            # a PositiveImbalance of 70
remainder.settle()
print(issuance)                    # {'DOT': 70}

with PositiveImbalance(5, "DOT", issuance) as extra:
    pass                           # settled on exit
print(issuance)                    # {'DOT': 75}
```

Using an imbalance after it has been consumed raises `RuntimeError`. Amounts saturate at the
128-bit maximum, and negative settlement stops at zero.

Querying an existential deposit:

```python
from paraledger.tokens_rpc import TokensRpc, to_number_or_hex

class Client:
    best_hash = "0xbest"

    def query_existential_deposit(self, at, currency_id):
        return 1_000_000

rpc = TokensRpc(Client())
print(rpc.query_existential_deposit(0))   # 1000000
print(to_number_or_hex(2**64))            # 0x10000000000000000
```

Values up to 2**64 - 1 come back as plain numbers and larger ones as hex strings. An error from
the client is raised as `RpcError` with code 1. A value that does not fit is raised as `RpcError`
with code -32602.

## What this package does not do

The package holds the types and configuration an asset registry works with, but not the registry
itself. Nothing in it stores assets, hands out asset ids, checks who is calling or records events.
There is no node, no command-line program, no network service and no persistent storage. Every
ledger that `Combiner`, `Mapper` and `TokensRpc` work with has to be supplied by the caller.

## Running the tests

```
pytest
```