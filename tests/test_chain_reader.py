# tests/test_chain_reader.py

from unittest.mock import AsyncMock, MagicMock

import pytest
from web3 import Web3

from staking_tracker.clients.chain_reader import ChainReader, STAKING_ABI
from staking_tracker.core.errors import ChainQueryError
from staking_tracker.types import RpcConfig


STAKING_ADDRESS = "0x60e78201ac487E5C382379dc8f9e39a896396728"


def make_reader(apy=7, staked=10_000_000):
    w3 = MagicMock()
    functions = w3.eth.contract.return_value.functions
    functions.fixedAPY.return_value.call = AsyncMock(return_value=apy)
    functions.totalAmountStaked.return_value.call = AsyncMock(return_value=staked)
    w3.is_connected = AsyncMock(return_value=True)
    return ChainReader(RpcConfig(endpoint_url="http://localhost:8545"), w3=w3), w3


def test_abi_declares_two_view_functions():
    names = {entry["name"]: entry for entry in STAKING_ABI}
    assert set(names) == {"fixedAPY", "totalAmountStaked"}
    assert names["fixedAPY"]["outputs"][0]["type"] == "uint8"
    assert names["totalAmountStaked"]["outputs"][0]["type"] == "uint256"
    assert all(entry["stateMutability"] == "view" for entry in STAKING_ABI)


@pytest.mark.asyncio
async def test_reads_contract_values():
    reader, w3 = make_reader(apy=7, staked=10_000_000)

    assert await reader.fixed_apy(STAKING_ADDRESS) == 7
    assert await reader.total_amount_staked(STAKING_ADDRESS) == 10_000_000

    _, kwargs = w3.eth.contract.call_args
    assert kwargs["address"] == Web3.to_checksum_address(STAKING_ADDRESS)
    assert kwargs["abi"] == STAKING_ABI


@pytest.mark.asyncio
async def test_contract_instances_are_cached_per_address():
    reader, w3 = make_reader()

    await reader.fixed_apy(STAKING_ADDRESS)
    await reader.total_amount_staked(STAKING_ADDRESS.lower())

    assert w3.eth.contract.call_count == 1


@pytest.mark.asyncio
async def test_call_failure_becomes_chain_query_error():
    reader, w3 = make_reader()
    w3.eth.contract.return_value.functions.fixedAPY.return_value.call = AsyncMock(
        side_effect=ConnectionError("connection refused"))

    with pytest.raises(ChainQueryError) as exc_info:
        await reader.fixed_apy(STAKING_ADDRESS)

    assert exc_info.value.function_name == "fixedAPY"
    assert exc_info.value.address == STAKING_ADDRESS
    assert "connection refused" in str(exc_info.value)


@pytest.mark.asyncio
async def test_invalid_address_becomes_chain_query_error():
    reader, _ = make_reader()

    with pytest.raises(ChainQueryError):
        await reader.total_amount_staked("0xnot-an-address")


@pytest.mark.asyncio
async def test_is_connected_reports_failures_as_false():
    reader, w3 = make_reader()
    assert await reader.is_connected() is True

    w3.is_connected = AsyncMock(side_effect=OSError("down"))
    assert await reader.is_connected() is False
