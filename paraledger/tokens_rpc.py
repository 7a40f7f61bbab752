"""RPC query for the existential deposit of a currency."""

from __future__ import annotations

import operator
from typing import Any, Hashable, Protocol

METHOD_NAME = "tokens_queryExistentialDeposit"
RUNTIME_ERROR = 1
INVALID_PARAMS = -32602
NUMBER_MAX = 2**64 - 1
HEX_MAX = 2**256 - 1


class TokensRuntimeApi(Protocol):
    """What the RPC needs from the node client."""

    best_hash: Hashable

    def query_existential_deposit(self, at: Hashable, currency_id: Any) -> int: ...


class RpcError(Exception):
    """A JSON-RPC error with its code, message and optional data."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data


def to_number_or_hex(value: int) -> int | str:
    """Return a plain number if it fits in 64 bits, otherwise a hex string."""
    value = operator.index(value)
    if not 0 <= value <= HEX_MAX:
        raise ValueError(f"{value} doesn't fit in NumberOrHex representation")
    return value if value <= NUMBER_MAX else f"0x{value:x}"


class TokensRpc:
    """Answers existential deposit queries against a client."""

    def __init__(self, client: TokensRuntimeApi) -> None:
        self._client = client

    def query_existential_deposit(self, currency_id: Any, at: Hashable | None = None) -> int | str:
        block = self._client.best_hash if at is None else at
        try:
            balance = self._client.query_existential_deposit(block, currency_id)
        except Exception as exc:
            raise RpcError(
                RUNTIME_ERROR, "Unable to query existential deposit.", str(exc)
            ) from exc
        try:
            return to_number_or_hex(balance)
        except (TypeError, ValueError) as exc:
            raise RpcError(
                INVALID_PARAMS, f"{balance} doesn't fit in NumberOrHex representation"
            ) from exc