import pytest
from fastapi.testclient import TestClient

from app.core.cache import CacheStore
from app.core.kv_store import MemoryKeyValueStore, SqlKeyValueStore
from app.database.db import Base, make_engine, make_session_factory
from app.database import models  # noqa: F401
from app.main import create_app
from app.middleware.rate_limit import limiter

TTL_MS = 3_600_000


class FakeClock:
    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture(autouse=True)
def no_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_kv():
    return MemoryKeyValueStore()


@pytest.fixture
def sql_engine():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_kv(sql_engine):
    return SqlKeyValueStore(make_session_factory(sql_engine))


@pytest.fixture
def market_cache(sql_kv, clock):
    return CacheStore(sql_kv, "market_trends_", TTL_MS, clock=clock)


@pytest.fixture
def client(sql_kv, market_cache):
    app = create_app(kv_store=sql_kv, market_cache=market_cache)
    with TestClient(app) as c:
        yield c
