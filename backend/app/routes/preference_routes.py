# app/routes/preference_routes.py
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException
import logging

from app.core.errors import StorageFault
from app.core.kv_store import KeyValueStore
from app.core.settings import settings
from app.dependencies import get_kv_store
from app.schemas import DataResponse, PreferencesCreate, SuccessResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=SuccessResponse)
def save_user_preferences(body: PreferencesCreate, kv: KeyValueStore = Depends(get_kv_store)):
    """Saves preferences, stamping them with ``lastUpdated``."""
    record = {**body.preferences, "lastUpdated": datetime.now(timezone.utc).isoformat()}
    try:
        kv.set(f"{settings.preferences_prefix}{body.user_id}", record)
    except StorageFault:
        logger.exception("Error saving user preferences")
        raise HTTPException(status_code=500, detail="Failed to save preferences")
    return SuccessResponse(message="Preferences saved")


@router.get("/{user_id}", response_model=DataResponse)
def get_user_preferences(user_id: str, kv: KeyValueStore = Depends(get_kv_store)):
    try:
        data = kv.get(f"{settings.preferences_prefix}{user_id}")
    except StorageFault:
        logger.exception("Error retrieving user preferences")
        raise HTTPException(status_code=500, detail="Failed to retrieve preferences")
    if data is None:
        raise HTTPException(status_code=404, detail="Preferences not found")
    return DataResponse(data=data)
