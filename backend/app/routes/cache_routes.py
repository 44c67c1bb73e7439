from fastapi import APIRouter, Depends, HTTPException
import logging

from app.core.cache import CacheStore
from app.core.errors import EntryNotFound, StorageFault
from app.dependencies import get_market_cache
from app.schemas import CacheWrite, DataResponse, SuccessResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/{field}", response_model=SuccessResponse)
def cache_market_data(field: str, body: CacheWrite, cache: CacheStore = Depends(get_market_cache)):
    """Caches market data for a field for the configured TTL."""
    try:
        cache.put(field, body.data)
    except StorageFault:
        logger.exception(f"Error caching market data for '{field}'")
        raise HTTPException(status_code=500, detail="Failed to cache market data")
    return SuccessResponse(message="Market data cached")


@router.get("/{field}", response_model=DataResponse)
def get_market_data(field: str, cache: CacheStore = Depends(get_market_cache)):
    """Returns cached market data, or 404 when absent or expired."""
    try:
        data = cache.get(field)
    except EntryNotFound:
        raise HTTPException(status_code=404, detail="No cached data found")
    except StorageFault:
        logger.exception(f"Error retrieving cached market data for '{field}'")
        raise HTTPException(status_code=500, detail="Failed to retrieve cached data")
    return DataResponse(data=data)


@router.delete("/{field}", response_model=SuccessResponse)
def delete_market_data(field: str, cache: CacheStore = Depends(get_market_cache)):
    try:
        cache.delete(field)
    except StorageFault:
        logger.exception(f"Error deleting cached market data for '{field}'")
        raise HTTPException(status_code=500, detail="Failed to delete cached data")
    return SuccessResponse(message="Cache entry removed")
