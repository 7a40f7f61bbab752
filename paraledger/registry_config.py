"""Configuration, weights and location type for the asset registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable

U32_MAX = 2**32 - 1
U128_MAX = 2**128 - 1


@dataclass(frozen=True)
class AssetLocation:
    """Native location of an asset, a path of junctions; empty means null."""

    parts: tuple[Hashable, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))

    @property
    def is_null(self) -> bool:
        return not self.parts


class WeightInfo:
    """Weights of the registry calls; every call is free."""

    def register(self) -> int:
        return 0

    def update(self) -> int:
        return 0

    def set_metadata(self) -> int:
        return 0

    def set_location(self) -> int:
        return 0


@dataclass(frozen=True)
class RegistryConfig:
    """Limits and reserved identifiers the asset registry works with."""

    string_limit: int = 10
    sequential_id_start_at: int = 1_000_000
    native_asset_id: int = 0
    asset_id_max: int = U32_MAX
    balance_max: int = U128_MAX
    native_asset_name: bytes = b"BSX"
    weights: WeightInfo = field(default_factory=WeightInfo, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "native_asset_name", bytes(self.native_asset_name))
        if self.string_limit < 0:
            raise ValueError("string limit must not be negative")
        if self.asset_id_max < 0 or self.balance_max < 0:
            raise ValueError("maximum values must not be negative")
        for name in ("sequential_id_start_at", "native_asset_id"):
            value = getattr(self, name)
            if not 0 <= value <= self.asset_id_max:
                raise ValueError(f"{name} {value} is outside the asset id range")