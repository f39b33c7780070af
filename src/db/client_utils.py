"""
Database utility functions for client profile management
"""
from sqlalchemy.orm import Session
from .models import Client
from typing import List, Optional


def create_client(db: Session, **fields) -> Client:
    """
    Create a new client profile

    Args:
        db: Database session
        **fields: Column values for the Client record

    Returns:
        Created Client instance
    """
    client = Client(**fields)

    db.add(client)
    db.commit()
    db.refresh(client)

    return client


def get_client(db: Session, client_id) -> Optional[Client]:
    """
    Get a single client by ID

    Args:
        db: Database session
        client_id: Client UUID

    Returns:
        Client instance, or None if no client has this ID
    """
    return db.query(Client).filter(Client.id == client_id).first()


def list_clients(db: Session) -> List[Client]:
    """Get all clients, most recent first."""
    return db.query(Client).order_by(Client.created_at.desc()).all()
