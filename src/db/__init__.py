"""
Database Module for the Coaching Program Backend
Client profiles and generated workout programs.
"""

from .database import engine, SessionLocal, get_db, init_db
from .models import (
    Base,
    Client,
    WorkoutProgram,
)

__all__ = [
    # Database utilities
    "engine",
    "SessionLocal",
    "get_db",
    "init_db",

    # Models
    "Base",
    "Client",
    "WorkoutProgram",
]

__version__ = "1.0.0"
