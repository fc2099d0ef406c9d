# api/routers/staking.py

from typing import Any, Dict, List

import msgspec
from fastapi import APIRouter, Depends, HTTPException

from staking_tracker.core.errors import StorageError
from staking_tracker.core.logging import log_with_context, DEBUG, INFO, ERROR
from staking_tracker.database.store import StakingStore
from staking_tracker.services.sync_service import StakingSyncService
from staking_tracker.types import is_evm_address
from ..dependencies import get_staking_store, get_sync_service, get_logger

router = APIRouter()

FETCH_FAILED = "Failed to fetch staking data"
NOT_FOUND = "Staking data not found"
UPDATE_FAILED = "Failed to update staking data"
UPDATE_OK = "All staking data updated successfully"


def format_staking(record) -> Dict[str, Any]:
    """Convert staking model to API response format.

    Keys are the snake_case column names (protocol_id, token_address,
    token_symbol, is_stablecoin, logo_url, ...). Clients of the earlier
    camelCase API (idProtocol, addressToken, nameToken, stablecoin, logo)
    must map these names.
    """
    return record.to_dict()


@router.get("")
async def get_staking_data(
    store: StakingStore = Depends(get_staking_store),
    logger = Depends(get_logger)
) -> List[Dict[str, Any]]:
    """Get every staking record"""
    try:
        records = await store.find_all()
    except StorageError as e:
        log_with_context(logger, ERROR, "Error fetching staking data", error=str(e))
        raise HTTPException(status_code=500, detail=FETCH_FAILED)

    log_with_context(logger, DEBUG, "Staking data fetched", count=len(records))
    return [format_staking(record) for record in records]


@router.post("/update")
async def update_staking(
    sync_service: StakingSyncService = Depends(get_sync_service),
    logger = Depends(get_logger)
) -> Dict[str, Any]:
    """Refresh every registered token from chain; per-token outcomes are in `results`"""
    try:
        results = await sync_service.sync_all()
    except Exception as e:
        log_with_context(logger, ERROR, "Error updating staking data",
                        error=f"{type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=UPDATE_FAILED)

    failed = [r.symbol for r in results if not r.ok]
    log_with_context(logger, INFO, "Staking update requested",
                    count=len(results), failed=failed)

    return {
        "message": UPDATE_OK,
        "results": [msgspec.structs.asdict(r) for r in results],
    }


@router.get("/address/{address}")
async def get_staking_by_address(
    address: str,
    store: StakingStore = Depends(get_staking_store),
    logger = Depends(get_logger)
) -> Dict[str, Any]:
    """Get the staking record for a token address"""
    if not is_evm_address(address):
        raise HTTPException(status_code=400, detail="Invalid token address")

    try:
        record = await store.find_by_address(address)
    except StorageError as e:
        log_with_context(logger, ERROR, "Error fetching staking data by address",
                        token_address=address, error=str(e))
        raise HTTPException(status_code=500, detail=FETCH_FAILED)

    if record is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    return format_staking(record)


@router.get("/{protocol_id}")
async def get_staking_by_protocol_id(
    protocol_id: str,
    store: StakingStore = Depends(get_staking_store),
    logger = Depends(get_logger)
) -> List[Dict[str, Any]]:
    """Get staking records for a protocol id such as ``AaveV3_USDC``"""
    try:
        records = await store.find_by_protocol_id(protocol_id)
    except StorageError as e:
        log_with_context(logger, ERROR, "Error fetching staking data by protocol",
                        protocol_id=protocol_id, error=str(e))
        raise HTTPException(status_code=500, detail=FETCH_FAILED)

    if not records:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    log_with_context(logger, DEBUG, "Staking data by protocol fetched",
                    protocol_id=protocol_id, count=len(records))
    return [format_staking(record) for record in records]
