"""FastAPI dependencies resolving the stores attached to ``app.state``."""
from fastapi import Request

from app.core.cache import CacheStore
from app.core.kv_store import KeyValueStore


def get_kv_store(request: Request) -> KeyValueStore:
    return request.app.state.kv_store


def get_market_cache(request: Request) -> CacheStore:
    return request.app.state.market_cache
