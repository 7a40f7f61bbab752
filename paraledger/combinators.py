"""Adapters joining single-asset and multi-asset balance interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Hashable, Protocol


class DepositConsequence(Enum):
    """Result of checking whether a deposit can be made."""

    BELOW_MINIMUM = "BelowMinimum"
    CANNOT_CREATE = "CannotCreate"
    UNKNOWN_ASSET = "UnknownAsset"
    OVERFLOW = "Overflow"
    SUCCESS = "Success"


@dataclass(frozen=True)
class WithdrawConsequence:
    """Result of checking whether a withdrawal can be made.

    ``balance`` is set only for ``REDUCED_TO_ZERO``: the amount that would be lost.
    """

    class Kind(Enum):
        NO_FUNDS = "NoFunds"
        WOULD_DIE = "WouldDie"
        UNKNOWN_ASSET = "UnknownAsset"
        UNDERFLOW = "Underflow"
        OVERFLOW = "Overflow"
        FROZEN = "Frozen"
        REDUCED_TO_ZERO = "ReducedToZero"
        SUCCESS = "Success"

    kind: Kind
    balance: int | None = None

    def __post_init__(self) -> None:
        needs_balance = self.kind is WithdrawConsequence.Kind.REDUCED_TO_ZERO
        if needs_balance != (self.balance is not None):
            raise ValueError("only ReducedToZero carries a balance, and it must")

    @classmethod
    def reduced_to_zero(cls, balance: int) -> WithdrawConsequence:
        return cls(cls.Kind.REDUCED_TO_ZERO, balance)

    def map_balance(self, convert: Callable[[int], int]) -> WithdrawConsequence:
        if self.balance is None:
            return self
        return WithdrawConsequence(self.kind, convert(self.balance))


for _kind in WithdrawConsequence.Kind:
    if _kind is not WithdrawConsequence.Kind.REDUCED_TO_ZERO:
        setattr(WithdrawConsequence, _kind.name, WithdrawConsequence(_kind))
del _kind


class Fungible(Protocol):
    """Balances of a single asset."""

    def total_issuance(self) -> int: ...
    def minimum_balance(self) -> int: ...
    def balance(self, who: Hashable) -> int: ...
    def reducible_balance(self, who: Hashable, keep_alive: bool) -> int: ...
    def can_deposit(self, who: Hashable, amount: int, mint: bool) -> DepositConsequence: ...
    def can_withdraw(self, who: Hashable, amount: int) -> WithdrawConsequence: ...
    def transfer(self, source: Hashable, dest: Hashable, amount: int, keep_alive: bool) -> int: ...
    def mint_into(self, dest: Hashable, amount: int) -> None: ...
    def burn_from(self, dest: Hashable, amount: int) -> int: ...


class Fungibles(Protocol):
    """Balances of many assets, each addressed by its id."""

    def total_issuance(self, asset: Any) -> int: ...
    def minimum_balance(self, asset: Any) -> int: ...
    def balance(self, asset: Any, who: Hashable) -> int: ...
    def reducible_balance(self, asset: Any, who: Hashable, keep_alive: bool) -> int: ...
    def can_deposit(
        self, asset: Any, who: Hashable, amount: int, mint: bool
    ) -> DepositConsequence: ...
    def can_withdraw(self, asset: Any, who: Hashable, amount: int) -> WithdrawConsequence: ...
    def transfer(
        self, asset: Any, source: Hashable, dest: Hashable, amount: int, keep_alive: bool
    ) -> int: ...
    def mint_into(self, asset: Any, dest: Hashable, amount: int) -> None: ...
    def burn_from(self, asset: Any, dest: Hashable, amount: int) -> int: ...


class ConvertBalance(Protocol):
    """Converts balances between two representations for a given asset."""

    def convert_balance(self, amount: int, asset_id: Any) -> int: ...
    def convert_balance_back(self, amount: int, asset_id: Any) -> int: ...


class Combiner:
    """Multi-asset view that routes the key asset to a single-asset backend."""

    def __init__(self, is_key: Callable[[Any], bool], single: Fungible, multi: Fungibles) -> None:
        self._is_key = is_key
        self._single = single
        self._multi = multi

    def total_issuance(self, asset: Any) -> int:
        if self._is_key(asset):
            return self._single.total_issuance()
        return self._multi.total_issuance(asset)

    def minimum_balance(self, asset: Any) -> int:
        if self._is_key(asset):
            return self._single.minimum_balance()
        return self._multi.minimum_balance(asset)

    def balance(self, asset: Any, who: Hashable) -> int:
        if self._is_key(asset):
            return self._single.balance(who)
        return self._multi.balance(asset, who)

    def reducible_balance(self, asset: Any, who: Hashable, keep_alive: bool) -> int:
        if self._is_key(asset):
            return self._single.reducible_balance(who, keep_alive)
        return self._multi.reducible_balance(asset, who, keep_alive)

    def can_deposit(self, asset: Any, who: Hashable, amount: int, mint: bool) -> DepositConsequence:
        if self._is_key(asset):
            return self._single.can_deposit(who, amount, mint)
        return self._multi.can_deposit(asset, who, amount, mint)

    def can_withdraw(self, asset: Any, who: Hashable, amount: int) -> WithdrawConsequence:
        if self._is_key(asset):
            return self._single.can_withdraw(who, amount)
        return self._multi.can_withdraw(asset, who, amount)

    def transfer(
        self, asset: Any, source: Hashable, dest: Hashable, amount: int, keep_alive: bool
    ) -> int:
        if self._is_key(asset):
            return self._single.transfer(source, dest, amount, keep_alive)
        return self._multi.transfer(asset, source, dest, amount, keep_alive)

    def mint_into(self, asset: Any, dest: Hashable, amount: int) -> None:
        if self._is_key(asset):
            self._single.mint_into(dest, amount)
        else:
            self._multi.mint_into(asset, dest, amount)

    def burn_from(self, asset: Any, dest: Hashable, amount: int) -> int:
        if self._is_key(asset):
            return self._single.burn_from(dest, amount)
        return self._multi.burn_from(asset, dest, amount)


class Mapper:
    """Single-asset view of one asset of a multi-asset backend, with balance conversion."""

    def __init__(self, assets: Fungibles, converter: ConvertBalance, currency_id: Any) -> None:
        self._assets = assets
        self._converter = converter
        self.currency_id = currency_id

    def _to_outer(self, amount: int) -> int:
        return self._converter.convert_balance(amount, self.currency_id)

    def _to_inner(self, amount: int) -> int:
        return self._converter.convert_balance_back(amount, self.currency_id)

    def total_issuance(self) -> int:
        return self._to_outer(self._assets.total_issuance(self.currency_id))

    def minimum_balance(self) -> int:
        return self._to_outer(self._assets.minimum_balance(self.currency_id))

    def balance(self, who: Hashable) -> int:
        return self._to_outer(self._assets.balance(self.currency_id, who))

    def reducible_balance(self, who: Hashable, keep_alive: bool) -> int:
        return self._to_outer(self._assets.reducible_balance(self.currency_id, who, keep_alive))

    def can_deposit(self, who: Hashable, amount: int, mint: bool) -> DepositConsequence:
        return self._assets.can_deposit(self.currency_id, who, self._to_inner(amount), mint)

    def can_withdraw(self, who: Hashable, amount: int) -> WithdrawConsequence:
        result = self._assets.can_withdraw(self.currency_id, who, self._to_inner(amount))
        return result.map_balance(self._to_outer)

    def transfer(self, source: Hashable, dest: Hashable, amount: int, keep_alive: bool) -> int:
        return self._assets.transfer(
            self.currency_id, source, dest, self._to_inner(amount), keep_alive
        )

    def mint_into(self, dest: Hashable, amount: int) -> None:
        self._assets.mint_into(self.currency_id, dest, self._to_inner(amount))

    def burn_from(self, dest: Hashable, amount: int) -> int:
        return self._assets.burn_from(self.currency_id, dest, self._to_inner(amount))