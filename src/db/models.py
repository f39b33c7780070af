from datetime import datetime, timezone
from sqlalchemy import (
    Column, Integer, String, DateTime, Text, ForeignKey, DECIMAL, JSON, Uuid
)
from sqlalchemy.orm import relationship, declarative_base
from sqlalchemy.dialects.postgresql import JSONB
import uuid

Base = declarative_base()

# JSONB on Postgres, plain JSON everywhere else
ProgramDocument = JSON().with_variant(JSONB(), "postgresql")


def _utcnow():
    return datetime.now(timezone.utc)


# -------------------------
# Clients
# -------------------------
class Client(Base):
    __tablename__ = "clients"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(String(50), nullable=False)
    height = Column(Integer, nullable=False)          # Height in centimeters
    weight = Column(DECIMAL(10, 2), nullable=False)   # Weight in kilograms
    experience = Column(String(100), nullable=False)  # Beginner, Intermediate, Advanced
    goals = Column(Text, nullable=False)              # Free text, comma separated
    training_frequency = Column(Integer, nullable=False)  # Days per week
    equipment = Column(Text, nullable=False)
    injuries = Column(Text, nullable=True)
    preferred_exercises = Column(Text, nullable=True)
    session_duration = Column(Integer, nullable=False)  # Minutes per session
    body_fat_percentage = Column(DECIMAL(5, 2), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    # Relationships
    workout_programs = relationship("WorkoutProgram", back_populates="client", cascade="all, delete-orphan")


# -------------------------
# Workout Programs (generated)
# -------------------------
class WorkoutProgram(Base):
    __tablename__ = "workout_programs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(Uuid(as_uuid=True), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    program_name = Column(String(255), nullable=False)
    duration_weeks = Column(Integer, nullable=False)
    split_type = Column(String(100), nullable=False)
    program_structure = Column(ProgramDocument, nullable=False)  # Opaque nested document
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="workout_programs")
