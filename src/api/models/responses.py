"""
Pydantic Response Models for FastAPI
"""
from pydantic import BaseModel, ConfigDict
from typing import Any, Optional
from datetime import datetime
from uuid import UUID

from api.schemas.view_schemas import RenderedView


class ClientResponse(BaseModel):
    """Response model for a full client profile"""
    model_config = ConfigDict(from_attributes=True)  # Allows loading from SQLAlchemy models

    id: UUID
    name: str
    age: int
    gender: str
    height: int
    weight: float
    experience: str
    goals: str
    training_frequency: int
    equipment: str
    injuries: Optional[str] = None
    preferred_exercises: Optional[str] = None
    session_duration: int
    body_fat_percentage: Optional[float] = None
    created_at: datetime


class ClientSummary(BaseModel):
    """Response model for client summary (for listing)"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    age: int
    goals: str
    training_frequency: int
    created_at: datetime


class ProgramResponse(BaseModel):
    """Response model for a full stored program"""
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                "client_id": "ee611076-e172-45c9-8562-c30aeebd037f",
                "program_name": "John Doe - Build musc (8w)",
                "duration_weeks": 8,
                "split_type": "Push/Pull/Legs/Rest",
                "program_structure": {"phases": [{"phaseName": "Strength & Hypertrophy", "weeks": []}]},
                "created_at": "2025-10-15T14:30:00Z"
            }
        }
    )

    id: UUID
    client_id: UUID
    program_name: str
    duration_weeks: int
    split_type: str
    program_structure: Any  # Stored document, passed through untouched
    created_at: datetime


class ProgramSummary(BaseModel):
    """Response model for program summary (for listing)"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    program_name: str
    duration_weeks: int
    split_type: str
    created_at: datetime


class ProgramViewResponse(BaseModel):
    """Response model for the rendered program view"""
    id: UUID
    program_name: str
    duration_weeks: int
    split_type: str
    view: RenderedView


class DeleteResponse(BaseModel):
    """Response model for deletions"""
    success: bool
    message: str
