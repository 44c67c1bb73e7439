# app/routes/system_routes.py
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException
import logging

from app.core.errors import StorageFault
from app.core.kv_store import KeyValueStore
from app.core.settings import settings
from app.dependencies import get_kv_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/analytics")
def analytics(kv: KeyValueStore = Depends(get_kv_store)):
    """Usage counts derived from the stored analyses and preferences."""
    try:
        analyses = kv.get_by_prefix(settings.analysis_prefix)
        preferences = kv.get_by_prefix(settings.preferences_prefix)
    except StorageFault:
        logger.exception("Error retrieving analytics")
        raise HTTPException(status_code=500, detail="Failed to retrieve analytics")

    return {
        "success": True,
        "data": {
            "totalAnalyses": len(analyses),
            "totalUsers": len(preferences),
            "lastWeekActivity": 0,
            "popularFields": {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }
