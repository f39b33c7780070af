"""
Pydantic schemas for generated workout programs.
These are the typed form of the program document stored with each program.
Field names are snake_case in Python and camelCase on the wire.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional
from uuid import UUID


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> Dict[str, Any]:
        """Plain JSON-ready dict with camelCase keys; unset optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ClientProfile(BaseModel):
    """The slice of a client record the generator reads"""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[UUID] = None
    name: str = ""
    training_frequency: Optional[Any] = None  # Clamped by the generator, never trusted
    goals: Optional[str] = ""
    experience: Optional[str] = ""


class ExerciseSchema(_CamelModel):
    """Schema for an exercise within a workout day"""
    exercise_name: str = Field(description="Exercise name (e.g., 'Secondary Movement')")
    sets: int = Field(ge=1, description="Number of working sets")
    reps: str = Field(description="Target reps, may be a range like '8-10'")
    rest_seconds: int = Field(ge=0, description="Rest between sets in seconds")
    tempo: str = Field(description="Tempo as eccentric-pause-concentric-pause, e.g. '3-0-1-0'")
    rpe_or_intensity: str = Field(description="RPE or intensity target, e.g. '7-8'")


class WorkoutDaySchema(_CamelModel):
    """Schema for a single training day"""
    day_name: str
    focus: str
    exercises: List[ExerciseSchema]
    notes: Optional[str] = None


class WeekSchema(_CamelModel):
    """Schema for a single week of training"""
    week_number: int = Field(ge=1, description="1-based, contiguous within a phase")
    phase: str = Field(description="Sub-phase label: Hypertrophy or Strength")
    weekly_focus: str
    workout_days: List[WorkoutDaySchema]


class PhaseSchema(_CamelModel):
    """Schema for a multi-week training phase"""
    phase_name: str
    weeks: List[WeekSchema]
    deload_included: bool = False
    notes: Optional[str] = None


class ProgramStructureSchema(_CamelModel):
    """Complete generated program document"""
    phases: List[PhaseSchema]
    progression_strategy: Optional[str] = None
    volume_distribution: Optional[str] = None
    overview: Optional[str] = None
    notes: Optional[str] = None
