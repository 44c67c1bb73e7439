# app/database/crud.py
from typing import Any, List, Optional, Tuple
from sqlalchemy.orm import Session
from app.database.models import KeyValueEntry


def kv_get(db: Session, key: str) -> Optional[Any]:
    """Returns the stored value for a key, or None."""
    entry = db.get(KeyValueEntry, key)
    return entry.value if entry is not None else None


def kv_set(db: Session, key: str, value: Any) -> None:
    """Writes a value, replacing whatever was stored under the key."""
    db.merge(KeyValueEntry(key=key, value=value))
    db.commit()


def kv_delete(db: Session, key: str) -> None:
    """Removes a key. Missing keys are not an error."""
    db.query(KeyValueEntry).filter(KeyValueEntry.key == key).delete()
    db.commit()


def kv_get_by_prefix(db: Session, prefix: str) -> List[Tuple[str, Any]]:
    """All (key, value) pairs whose key starts with prefix, ordered by key."""
    escaped = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    rows = (
        db.query(KeyValueEntry)
        .filter(KeyValueEntry.key.like(f"{escaped}%", escape="\\"))
        .order_by(KeyValueEntry.key)
        .all()
    )
    return [(row.key, row.value) for row in rows]
