import dataclasses

import pytest

from paraledger.asset_types import AssetDetails, AssetMetadata, AssetType, Metadata


def test_token_and_pool_share():
    token = AssetType.token()
    pool = AssetType.pool_share(10, 20)
    assert token == AssetType.token()
    assert token.is_token and not token.is_pool_share
    assert pool.is_pool_share and not pool.is_token
    assert pool.pool == (10, 20)
    assert pool == AssetType.pool_share(10, 20)
    assert (token == pool) is False


def test_asset_type_repr():
    assert repr(AssetType.token()) == "Token"
    assert repr(AssetType.pool_share(10, 20)) == "PoolShare(10, 20)"


def test_pool_needs_two_assets():
    with pytest.raises(ValueError):
        AssetType((1, 2, 3))


def test_asset_details_defaults_to_unlocked():
    details = AssetDetails(bytearray(b"HDX"), AssetType.token(), 1_000_000)
    assert details.locked is False
    assert details.name == b"HDX"


def test_asset_details_is_immutable_but_replaceable():
    details = AssetDetails(b"BTC", AssetType.token(), 1_000_000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        details.name = b"ETH"
    updated = dataclasses.replace(details, existential_deposit=1_234_567)
    assert updated.existential_deposit == 1_234_567
    assert updated.name == details.name


def test_asset_details_rejects_negative_deposit():
    with pytest.raises(ValueError):
        AssetDetails(b"BTC", AssetType.token(), -1)


def test_metadata_defaults():
    assert AssetMetadata() == AssetMetadata(b"", 0)
    assert Metadata().symbol == b""


def test_metadata_coerces_symbol_and_checks_decimals():
    assert Metadata(symbol=[83, 89, 77], decimals=18).symbol == b"SYM"
    with pytest.raises(ValueError):
        Metadata(symbol=b"SYM", decimals=256)
    with pytest.raises(ValueError):
        AssetMetadata(symbol=b"SYM", decimals=-1)