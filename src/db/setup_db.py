#!/usr/bin/env python3
"""
Database Setup Script
Run this script to create the clients and workout_programs tables.
"""

import sys
from pathlib import Path

# Add the parent directory to the path so we can import the module
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.exc import SQLAlchemyError

from core.config import Config
from db import init_db, Base


def main():
    print("=" * 50)
    print("Database Setup Script")
    print("=" * 50)

    print(f"\nTarget database: {Config.DATABASE_URL}")
    print("Set DATABASE_URL in your .env file to change it.\n")

    response = input("Do you want to continue? (y/n): ")

    if response.lower() != 'y':
        print("Setup cancelled.")
        return

    try:
        print("\nCreating tables...")
        init_db()

        print("\nTables created successfully!")
        print("\nThe following tables exist:")
        for table_name in Base.metadata.tables.keys():
            print(f"  - {table_name}")

    except SQLAlchemyError as e:
        print(f"\nError creating tables: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
