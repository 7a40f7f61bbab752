"""Value types stored by the asset registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

U8_MAX = 255


@dataclass(frozen=True)
class AssetType:
    """Either a plain token or a share of a pool of two assets."""

    pool: tuple[Hashable, Hashable] | None = None

    def __post_init__(self) -> None:
        if self.pool is not None:
            pool = tuple(self.pool)
            if len(pool) != 2:
                raise ValueError("a pool share is made of exactly two assets")
            object.__setattr__(self, "pool", pool)

    @classmethod
    def token(cls) -> AssetType:
        return cls()

    @classmethod
    def pool_share(cls, first: Hashable, second: Hashable) -> AssetType:
        return cls((first, second))

    @property
    def is_token(self) -> bool:
        return self.pool is None

    @property
    def is_pool_share(self) -> bool:
        return self.pool is not None

    def __repr__(self) -> str:
        if self.pool is None:
            return "Token"
        first, second = self.pool
        return f"PoolShare({first!r}, {second!r})"


def _check_decimals(decimals: int) -> None:
    if not 0 <= decimals <= U8_MAX:
        raise ValueError(f"decimals must fit in a byte, got {decimals}")


@dataclass(frozen=True)
class AssetDetails:
    """Name, type and existential deposit of a registered asset."""

    name: bytes
    asset_type: AssetType
    existential_deposit: int
    locked: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", bytes(self.name))
        if self.existential_deposit < 0:
            raise ValueError("existential deposit must not be negative")


@dataclass(frozen=True)
class AssetMetadata:
    """Stored ticker symbol and decimal places of an asset."""

    symbol: bytes = b""
    decimals: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbol", bytes(self.symbol))
        _check_decimals(self.decimals)


@dataclass(frozen=True)
class Metadata:
    """Symbol and decimals supplied when registering an asset."""

    symbol: bytes = b""
    decimals: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbol", bytes(self.symbol))
        _check_decimals(self.decimals)