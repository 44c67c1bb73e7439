# app/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict

class CacheWrite(BaseModel):
    data: Any

class AnalysisCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: str = Field(alias="studentId", min_length=1)
    analysis_data: Dict[str, Any] = Field(alias="analysisData")

class PreferencesCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId", min_length=1)
    preferences: Dict[str, Any]

class SuccessResponse(BaseModel):
    success: bool = True
    message: str | None = None

class DataResponse(BaseModel):
    success: bool = True
    data: Any

class ErrorResponse(BaseModel):
    detail: str
