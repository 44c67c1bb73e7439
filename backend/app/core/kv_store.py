"""Generic key-value stores backing the cache and blob endpoints.

Two implementations share one interface: ``SqlKeyValueStore`` persists rows
through SQLAlchemy, ``MemoryKeyValueStore`` keeps a dict in-process for tests
and local runs.
"""
import copy
import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import StorageFault
from app.database import crud

logger = logging.getLogger(__name__)


class KeyValueStore:
    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def get_by_prefix(self, prefix: str) -> List[Tuple[str, Any]]:
        raise NotImplementedError


class SqlKeyValueStore(KeyValueStore):
    """Key-value store over the ``kv_store`` table.

    Every call opens and closes its own session. Any SQLAlchemy error is
    re-raised as ``StorageFault`` so callers never see driver exceptions.
    """

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def _run(self, op_name: str, fn, *args):
        db = self._session_factory()
        try:
            return fn(db, *args)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Key-value {op_name} failed: {e}")
            raise StorageFault(f"Key-value {op_name} failed") from e
        finally:
            db.close()

    def get(self, key: str) -> Optional[Any]:
        return self._run("get", crud.kv_get, key)

    def set(self, key: str, value: Any) -> None:
        self._run("set", crud.kv_set, key, value)

    def delete(self, key: str) -> None:
        self._run("delete", crud.kv_delete, key)

    def get_by_prefix(self, prefix: str) -> List[Tuple[str, Any]]:
        return self._run("get_by_prefix", crud.kv_get_by_prefix, prefix)


class MemoryKeyValueStore(KeyValueStore):
    """Thread-safe dict store. Values are deep-copied in and out."""

    def __init__(self):
        self._store: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            value = self._store.get(key)
        return copy.deepcopy(value)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._store[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def get_by_prefix(self, prefix: str) -> List[Tuple[str, Any]]:
        with self._lock:
            items = [(k, v) for k, v in self._store.items() if k.startswith(prefix)]
        return [(k, copy.deepcopy(v)) for k, v in sorted(items)]
