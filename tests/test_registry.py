# tests/test_registry.py

import json

import pytest

from staking_tracker.core.errors import ConfigurationError, UnknownTokenError
from staking_tracker.registry import TokenRegistry, LogoLookup, DEFAULT_TOKENS
from staking_tracker.types import TokenDescriptor


UNI_TOKEN = "0x6c8D1fd3AA9F436CBA20E4b6A5aeDb1bf814A732"


def test_default_registry_contains_supported_tokens(registry):
    assert registry.symbols == ("UNI", "USDC", "USDT", "DAI", "WETH")
    assert len(registry) == 5
    assert "DAI" in registry
    assert "BTC" not in registry


def test_lookup_by_symbol_and_address(registry):
    uni = registry.get("UNI")
    assert uni.token_address == UNI_TOKEN
    assert uni.project_name == "Uniswap"
    assert uni.protocol_id == "Uniswap_UNI"

    assert registry.find_by_address(UNI_TOKEN.lower()) is uni
    assert registry.find_by_address("0x0000000000000000000000000000000000000001") is None


def test_unknown_symbol_raises(registry):
    with pytest.raises(UnknownTokenError):
        registry.get("BTC")


def test_duplicate_symbol_rejected():
    uni = DEFAULT_TOKENS[0]
    with pytest.raises(ValueError, match="Duplicate token symbol"):
        TokenRegistry([uni, uni])


def test_duplicate_address_rejected():
    uni = DEFAULT_TOKENS[0]
    clone = TokenDescriptor(
        symbol="UNI2",
        token_address=uni.token_address.lower(),
        staking_address=uni.staking_address,
        project_name="Clone",
    )
    with pytest.raises(ValueError, match="Duplicate token address"):
        TokenRegistry([uni, clone])


def test_invalid_address_rejected():
    bad = TokenDescriptor(symbol="BAD", token_address="0x123", staking_address="0x456", project_name="Bad")
    with pytest.raises(ValueError):
        TokenRegistry([bad])


def test_descriptors_are_immutable(registry):
    with pytest.raises(AttributeError):
        registry.get("UNI").symbol = "XYZ"


def test_logo_lookup(registry):
    logos = LogoLookup(registry)
    assert logos.get(UNI_TOKEN) == "https://cryptologos.cc/logos/uniswap-uni-logo.png"
    assert logos.get(UNI_TOKEN.lower()) == "https://cryptologos.cc/logos/uniswap-uni-logo.png"
    assert logos.get("0x0000000000000000000000000000000000000001") == ""
    assert len(logos) == 5


def test_registry_from_file(tmp_path):
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps([
        {
            "symbol": "ARB",
            "token_address": "0x912CE59144191C1204E64559FE8253a0e49E6548",
            "staking_address": "0x1111111111111111111111111111111111111111",
            "project_name": "Arbitrum",
        }
    ]))

    registry = TokenRegistry.from_file(path)

    assert registry.symbols == ("ARB",)
    assert registry.get("ARB").logo_url == ""
    assert LogoLookup(registry).get("0x912CE59144191C1204E64559FE8253a0e49E6548") == ""


def test_registry_from_bad_file(tmp_path):
    path = tmp_path / "tokens.json"
    path.write_text('{"not": "a list"}')

    with pytest.raises(ConfigurationError):
        TokenRegistry.from_file(path)

    with pytest.raises(ConfigurationError):
        TokenRegistry.from_file(tmp_path / "missing.json")
