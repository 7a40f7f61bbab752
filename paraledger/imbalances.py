"""Tokens for funds created or destroyed without matching accounting."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Hashable, MutableMapping

U128_MAX = 2**128 - 1


@dataclass(frozen=True)
class Offset:
    """Outcome of offsetting an imbalance against its opposite.

    ``same`` holds the remainder when the original was larger, ``other`` when the
    opposite was larger; both are None when they cancelled out exactly.
    """

    same: Any = None
    other: Any = None

    @property
    def is_none(self) -> bool:
        return self.same is None and self.other is None


class _Imbalance:
    def __init__(
        self,
        amount: int,
        currency_id: Hashable,
        issuance: MutableMapping[Hashable, int],
        *,
        balance_max: int = U128_MAX,
    ) -> None:
        amount = operator.index(amount)
        if not 0 <= amount <= balance_max:
            raise ValueError(f"amount {amount} is outside the balance range")
        self.currency_id = currency_id
        self._amount = amount
        self._issuance = issuance
        self._balance_max = balance_max
        self._live = True

    def _spawn(self, cls: type, amount: int) -> Any:
        return cls(amount, self.currency_id, self._issuance, balance_max=self._balance_max)

    def _check_live(self) -> None:
        if not self._live:
            raise RuntimeError("imbalance has already been consumed")

    def _consume(self) -> None:
        self._check_live()
        self._live = False

    def _check_partner(self, other: _Imbalance, cls: type) -> None:
        if type(other) is not cls:
            raise TypeError(f"expected {cls.__name__}, got {type(other).__name__}")
        if other.currency_id != self.currency_id:
            raise ValueError("imbalances belong to different currencies")
        self._check_live()
        other._check_live()
        if other is self:
            raise ValueError("an imbalance cannot be combined with itself")

    def _saturating_add(self, left: int, right: int) -> int:
        return min(left + right, self._balance_max)

    def _drop_zero(self) -> bool:
        self._check_live()
        if self._amount == 0:
            self._live = False
            return True
        return False

    def _split(self, amount: int):
        first = min(self._amount, amount)
        second = self._amount - first
        self._consume()
        cls = type(self)
        return self._spawn(cls, first), self._spawn(cls, second)

    def _subsume(self, other) -> None:
        self._check_partner(other, type(self))
        other._consume()
        self._amount = self._saturating_add(self._amount, other._amount)

    def _offset(self, other, opposite: type) -> Offset:
        self._check_partner(other, opposite)
        a, b = self._amount, other._amount
        self._consume()
        other._consume()
        if a > b:
            return Offset(same=self._spawn(type(self), a - b))
        if b > a:
            return Offset(other=self._spawn(opposite, b - a))
        return Offset()

    def _peek(self) -> int:
        self._check_live()
        return self._amount

    def _settle(self, adjust: Callable[[int], int]) -> None:
        self._consume()
        current = self._issuance.get(self.currency_id, 0)
        self._issuance[self.currency_id] = adjust(current)

    @property
    def settled(self) -> bool:
        return not self._live

    def __enter__(self):
        self._check_live()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._live:
            self.settle()

    def settle(self) -> None:
        """Square up the total issuance of the currency and consume the imbalance."""
        raise TypeError("settle is defined by the concrete imbalance kinds")

    def __repr__(self) -> str:
        state = "" if self._live else ", consumed"
        return f"{type(self).__name__}({self._amount}, {self.currency_id!r}{state})"


class PositiveImbalance(_Imbalance):
    """Funds created without an opposite entry; settling raises total issuance."""

    @classmethod
    def zero(cls, currency_id: Hashable, issuance: MutableMapping[Hashable, int]):
        """A zero-valued imbalance for the currency."""
        return cls(0, currency_id, issuance)

    def drop_zero(self) -> bool:
        """Discard the imbalance if it is zero; return whether it was discarded."""
        return self._drop_zero()

    def split(self, amount: int):
        """Split into at most ``amount`` and the rest; this imbalance is consumed."""
        return self._split(amount)

    def merge(self, other):
        """Absorb another positive imbalance and return this one."""
        self._subsume(other)
        return self

    def subsume(self, other) -> None:
        """Absorb another positive imbalance in place."""
        self._subsume(other)

    def offset(self, other) -> Offset:
        """Cancel against a negative imbalance; both are consumed."""
        return self._offset(other, NegativeImbalance)

    def peek(self) -> int:
        return self._peek()

    def settle(self) -> None:
        """Add the amount to total issuance and consume the imbalance."""
        amount = self._amount
        self._settle(lambda current: self._saturating_add(current, amount))


class NegativeImbalance(_Imbalance):
    """Funds destroyed without an opposite entry; settling lowers total issuance."""

    @classmethod
    def zero(cls, currency_id: Hashable, issuance: MutableMapping[Hashable, int]):
        """A zero-valued imbalance for the currency."""
        return cls(0, currency_id, issuance)

    def drop_zero(self) -> bool:
        """Discard the imbalance if it is zero; return whether it was discarded."""
        return self._drop_zero()

    def split(self, amount: int):
        """Split into at most ``amount`` and the rest; this imbalance is consumed."""
        return self._split(amount)

    def merge(self, other):
        """Absorb another negative imbalance and return this one."""
        self._subsume(other)
        return self

    def subsume(self, other) -> None:
        """Absorb another negative imbalance in place."""
        self._subsume(other)

    def offset(self, other) -> Offset:
        """Cancel against a positive imbalance; both are consumed."""
        return self._offset(other, PositiveImbalance)

    def peek(self) -> int:
        return self._peek()

    def settle(self) -> None:
        """Subtract the amount from total issuance and consume the imbalance."""
        amount = self._amount
        self._settle(lambda current: max(current - amount, 0))