"""
Clients Router
Endpoints for creating and reading client profiles
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from api.models.requests import CreateClientRequest
from api.models.responses import ClientResponse, ClientSummary
from db.database import get_db
from db.client_utils import create_client, get_client, list_clients

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client_profile(
    request: CreateClientRequest,
    db: Session = Depends(get_db)
):
    """
    Create a new client profile.

    Returns:
        201 Created with the stored client
    """
    client = create_client(db, **request.model_dump())

    logger.info("[CLIENTS] Created client %s (%s)", client.id, client.name)
    return client


@router.get("", response_model=List[ClientSummary])
async def list_client_profiles(db: Session = Depends(get_db)):
    """Get all clients."""
    clients = list_clients(db)
    logger.info("[CLIENTS] Fetched %d clients", len(clients))
    return clients


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client_profile(
    client_id: UUID,
    db: Session = Depends(get_db)
):
    """
    Get a client by ID.

    Raises:
        404: Client not found
    """
    client = get_client(db, client_id)

    if not client:
        logger.warning("[CLIENTS] Client %s not found", client_id)
        raise HTTPException(status_code=404, detail="Client not found")

    return client
