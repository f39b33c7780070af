"""
Pydantic schemas for the rendered (normalized) program view.
This is the only program shape presentation code should consume.
"""
from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union


class ExerciseView(BaseModel):
    """One exercise; every detail field is omitted when the source lacks it"""
    position: int = Field(ge=1, description="1-based position within the day")
    name: str
    muscle_group: Optional[str] = None
    sets: Optional[str] = None
    reps: Optional[str] = None
    rest: Optional[str] = None
    tempo: Optional[str] = None
    rpe: Optional[str] = None
    notes: Optional[str] = None


class DayView(BaseModel):
    name: str
    focus: Optional[str] = None
    exercises: List[ExerciseView] = []
    notes: Optional[str] = None


class WeekView(BaseModel):
    week_number: Optional[int] = None  # None for the implicit week of a flat day list
    phase: Optional[str] = None
    focus: Optional[str] = None
    days: List[DayView] = []
    notes: Optional[str] = None


class PhaseView(BaseModel):
    name: str
    goal: Optional[str] = None
    week_range: Optional[str] = None
    deload_included: Optional[bool] = None
    weeks: List[WeekView] = []
    notes: Optional[str] = None


class StructuredProgramView(BaseModel):
    """A recognized program document, normalized phase → week → day → exercise"""
    kind: Literal["structured"] = "structured"
    phases: List[PhaseView]
    progression_strategy: Optional[str] = None
    volume_distribution: Optional[str] = None
    overview: Optional[str] = None
    notes: Optional[str] = None


class PlaceholderView(BaseModel):
    """No program data at all; the program should be regenerated"""
    kind: Literal["placeholder"] = "placeholder"
    message: str


class RawProgramView(BaseModel):
    """A document in an unknown shape, dumped as JSON for diagnostics"""
    kind: Literal["raw"] = "raw"
    raw_json: str
    truncated: bool = False


RenderedView = Annotated[
    Union[StructuredProgramView, PlaceholderView, RawProgramView],
    Field(discriminator="kind"),
]
