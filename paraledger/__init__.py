"""Chain primitives, asset registry types, token imbalances and balance adapters."""

__version__ = "0.1.0"
__all__ = [
    "asset_types",
    "combinators",
    "imbalances",
    "primitives",
    "registry_config",
    "tokens_rpc",
]