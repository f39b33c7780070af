"""
Database utility functions for program management
"""
from sqlalchemy.orm import Session
from .models import WorkoutProgram
from typing import List, Optional


def create_workout_program(
    db: Session,
    client_id,
    program_name: str,
    duration_weeks: int,
    split_type: str,
    program_structure: dict
) -> WorkoutProgram:
    """
    Persist a generated program as a single document.

    The structure is stored by value; nothing is written until the single
    commit, and a failed commit is rolled back before the error propagates.

    Args:
        db: Database session
        client_id: Owning client's UUID
        program_name: Display name
        duration_weeks: Bounded program length in weeks
        split_type: Split-type label
        program_structure: JSON-serializable program document

    Returns:
        Created WorkoutProgram instance
    """
    program = WorkoutProgram(
        client_id=client_id,
        program_name=program_name,
        duration_weeks=duration_weeks,
        split_type=split_type,
        program_structure=program_structure
    )

    db.add(program)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(program)

    return program


def get_program(db: Session, program_id) -> Optional[WorkoutProgram]:
    """Get a single program by ID, or None."""
    return db.query(WorkoutProgram).filter(WorkoutProgram.id == program_id).first()


def list_client_programs(db: Session, client_id) -> List[WorkoutProgram]:
    """
    Get all programs for a client, most recent first.

    Args:
        db: Database session
        client_id: Client UUID

    Returns:
        List of WorkoutProgram instances
    """
    return db.query(WorkoutProgram).filter(
        WorkoutProgram.client_id == client_id
    ).order_by(WorkoutProgram.created_at.desc()).all()


def get_program_summary_list(db: Session, client_id) -> List[dict]:
    """
    Get list of programs with basic info for selection.

    Returns:
        List of dicts: [{id, program_name, duration_weeks, split_type, created_at}, ...]
    """
    return [
        {
            "id": program.id,
            "program_name": program.program_name,
            "duration_weeks": program.duration_weeks,
            "split_type": program.split_type,
            "created_at": program.created_at
        }
        for program in list_client_programs(db, client_id)
    ]


def delete_program(db: Session, program_id) -> bool:
    """
    Delete a program by ID.

    Returns:
        True if a program was deleted, False if it did not exist
    """
    program = get_program(db, program_id)
    if not program:
        return False

    db.delete(program)
    db.commit()
    return True
