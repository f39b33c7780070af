#!/usr/bin/env python3
"""
Create a test client for program generation testing
"""
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from sqlalchemy.exc import SQLAlchemyError

from db.database import SessionLocal, init_db
from db.models import Client
from db.client_utils import create_client

TEST_CLIENT_NAME = "Test Client"


def create_test_client():
    """Create or get a test client"""
    init_db()
    db = SessionLocal()

    try:
        # Check if test client already exists
        test_client = db.query(Client).filter(Client.name == TEST_CLIENT_NAME).first()

        if test_client:
            print(f"✅ Test client already exists")
            print(f"Client ID: {test_client.id}")
            print(f"Name: {test_client.name}")
            return str(test_client.id)

        print("Creating test client...")
        test_client = create_client(
            db,
            name=TEST_CLIENT_NAME,
            age=30,
            gender="Male",
            height=180,
            weight=85,
            experience="Intermediate",
            goals="Strength, general fitness",
            training_frequency=4,
            equipment="Barbell, Dumbbell",
            session_duration=60
        )

        print(f"✅ Test client created successfully")
        print(f"Client ID: {test_client.id}")
        print(f"Name: {test_client.name}")
        print(f"Goals: {test_client.goals}")

        return str(test_client.id)

    except SQLAlchemyError as e:
        print(f"❌ Error: {e}")
        db.rollback()
        return None
    finally:
        db.close()


if __name__ == "__main__":
    client_id = create_test_client()
    if client_id:
        print(f"\n📋 Copy this Client ID for testing:")
        print(f"{client_id}")
        print(f"\nGenerate a program with:")
        print(f"  curl -X POST http://localhost:8000/api/clients/{client_id}/generate-program")
    else:
        print("\n❌ Could not create or find a test client")
        sys.exit(1)
