"""
Programs Router
Endpoints for program generation, retrieval, rendering and deletion
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.models.responses import (
    DeleteResponse,
    ProgramResponse,
    ProgramSummary,
    ProgramViewResponse
)
from api.schemas.program_schemas import ClientProfile
from api.services.program_generator import generate_program
from api.services.program_metadata import (
    calculate_duration_weeks,
    determine_split_type,
    generate_program_name
)
from api.services.program_renderer import render_program
from core.config import Config
from db.database import get_db
from db.client_utils import get_client
from db.program_utils import (
    create_workout_program,
    delete_program,
    get_program,
    get_program_summary_list
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/clients/{client_id}/generate-program", response_model=ProgramResponse, status_code=201)
async def generate_client_program(
    client_id: UUID,
    db: Session = Depends(get_db)
):
    """
    Generate a workout program from a client's stored profile.

    The full program is built in memory and saved with a single write.

    Returns:
        201 Created with the stored program

    Raises:
        404: Client not found
        503: Program could not be saved (safe to retry)
    """
    client = get_client(db, client_id)

    if not client:
        logger.warning("[PROGRAMS] Client %s not found for program generation", client_id)
        raise HTTPException(status_code=404, detail="Client not found")

    profile = ClientProfile.model_validate(client)
    logger.info(
        "[PROGRAMS] Generating program for client %s (frequency=%s, goals=%r)",
        client_id, profile.training_frequency, profile.goals
    )

    structure = generate_program(profile)
    split_type = determine_split_type(profile.training_frequency, profile.goals)
    duration_weeks = calculate_duration_weeks(structure.phases)
    program_name = generate_program_name(profile.name, profile.goals, duration_weeks)

    try:
        program = create_workout_program(
            db=db,
            client_id=client.id,
            program_name=program_name,
            duration_weeks=duration_weeks,
            split_type=split_type,
            program_structure=structure.to_document()
        )
    except SQLAlchemyError as e:
        logger.error("[PROGRAMS] Failed to save program for client %s: %s", client_id, e)
        raise HTTPException(
            status_code=503,
            detail="Program could not be saved. Please try again.",
            headers={"Retry-After": str(Config.STORE_RETRY_AFTER_SECONDS)}
        ) from e

    logger.info(
        "[PROGRAMS] Created program %s for client %s: %s, %dw, %s",
        program.id, client_id, program_name, duration_weeks, split_type
    )
    return program


@router.get("/clients/{client_id}/programs", response_model=List[ProgramSummary])
async def list_client_programs(
    client_id: UUID,
    db: Session = Depends(get_db)
):
    """
    Get all programs for a client.

    Raises:
        404: Client not found
    """
    if not get_client(db, client_id):
        logger.warning("[PROGRAMS] Client %s not found", client_id)
        raise HTTPException(status_code=404, detail="Client not found")

    summaries = get_program_summary_list(db, client_id)
    logger.info("[PROGRAMS] Fetched %d programs for client %s", len(summaries), client_id)

    return [ProgramSummary(**s) for s in summaries]


@router.get("/programs/{program_id}", response_model=ProgramResponse)
async def get_program_details(
    program_id: UUID,
    db: Session = Depends(get_db)
):
    """
    Get a stored program, including its raw structure document.

    Raises:
        404: Program not found
    """
    program = get_program(db, program_id)

    if not program:
        logger.warning("[PROGRAMS] Program %s not found", program_id)
        raise HTTPException(status_code=404, detail="Program not found")

    return program


@router.get("/programs/{program_id}/view", response_model=ProgramViewResponse)
async def get_program_view(
    program_id: UUID,
    db: Session = Depends(get_db)
):
    """
    Get a program normalized for display.

    Legacy and partial documents render as a placeholder or raw dump
    instead of failing.

    Raises:
        404: Program not found
    """
    program = get_program(db, program_id)

    if not program:
        logger.warning("[PROGRAMS] Program %s not found", program_id)
        raise HTTPException(status_code=404, detail="Program not found")

    view = render_program(program.program_structure)
    logger.info("[PROGRAMS] Rendered program %s as %s view", program_id, view.kind)

    return ProgramViewResponse(
        id=program.id,
        program_name=program.program_name,
        duration_weeks=program.duration_weeks,
        split_type=program.split_type,
        view=view
    )


@router.delete("/programs/{program_id}", response_model=DeleteResponse)
async def delete_program_by_id(
    program_id: UUID,
    db: Session = Depends(get_db)
):
    """
    Delete a program.

    Raises:
        404: Program not found
    """
    if not delete_program(db, program_id):
        logger.warning("[PROGRAMS] Program %s not found for deletion", program_id)
        raise HTTPException(status_code=404, detail="Program not found")

    logger.info("[PROGRAMS] Deleted program %s", program_id)
    return DeleteResponse(success=True, message="Program deleted successfully")
