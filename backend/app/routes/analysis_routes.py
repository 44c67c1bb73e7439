# app/routes/analysis_routes.py
from fastapi import APIRouter, Depends, HTTPException
import logging

from app.core.errors import StorageFault
from app.core.kv_store import KeyValueStore
from app.core.settings import settings
from app.dependencies import get_kv_store
from app.schemas import AnalysisCreate, DataResponse, SuccessResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=SuccessResponse)
def store_student_analysis(body: AnalysisCreate, kv: KeyValueStore = Depends(get_kv_store)):
    """Stores a student's analysis blob. Entries do not expire."""
    try:
        kv.set(f"{settings.analysis_prefix}{body.student_id}", body.analysis_data)
    except StorageFault:
        logger.exception("Error storing student analysis")
        raise HTTPException(status_code=500, detail="Failed to store analysis")
    logger.info(f"Stored analysis for student: {body.student_id}")
    return SuccessResponse(message="Analysis stored successfully")


@router.get("/{student_id}", response_model=DataResponse)
def get_student_analysis(student_id: str, kv: KeyValueStore = Depends(get_kv_store)):
    try:
        data = kv.get(f"{settings.analysis_prefix}{student_id}")
    except StorageFault:
        logger.exception("Error retrieving student analysis")
        raise HTTPException(status_code=500, detail="Failed to retrieve analysis")
    if data is None:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return DataResponse(data=data)
