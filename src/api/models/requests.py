"""
Pydantic Request Models for FastAPI
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class CreateClientRequest(BaseModel):
    """Request model for creating a client profile"""
    name: str = Field(min_length=1, max_length=100, description="Client's name")
    age: int = Field(ge=13, le=100, description="Client's age in years")
    gender: str = Field(min_length=1, max_length=50)
    height: int = Field(gt=0, lt=300, description="Height in centimeters")
    weight: float = Field(gt=0, lt=500, description="Weight in kilograms")
    experience: str = Field(min_length=1, max_length=100, description="Training experience level")
    goals: str = Field(min_length=1, max_length=500, description="Goals in the client's own words, comma separated")
    training_frequency: int = Field(ge=1, le=7, description="Training days per week")
    equipment: str = Field(min_length=1, max_length=500, description="Available equipment")
    injuries: Optional[str] = Field(default=None, max_length=1000)
    preferred_exercises: Optional[str] = Field(default=None, max_length=1000)
    session_duration: int = Field(ge=10, le=240, description="Available minutes per session")
    body_fat_percentage: Optional[float] = Field(default=None, ge=0, le=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "age": 30,
                "gender": "Male",
                "height": 180,
                "weight": 85,
                "experience": "Intermediate",
                "goals": "Build muscle, improve strength",
                "training_frequency": 4,
                "equipment": "Barbell, Dumbbell",
                "session_duration": 60,
                "injuries": "None",
                "body_fat_percentage": 18.5
            }
        }
    )
