#!/usr/bin/env python3
"""
Database management script for the Gigboard backend.
Creates and drops the schema described by the ORM models.
"""

import logging
import sys

from app.config import get_settings
from app.infrastructure.db.database import create_db_engine, create_all_tables, drop_all_tables


def create_tables(database_url: str) -> None:
    """Create every missing table."""
    engine = create_db_engine(database_url)
    try:
        create_all_tables(engine)
        print("Tables created.")
    finally:
        engine.dispose()


def drop_tables(database_url: str) -> None:
    """Drop every table."""
    engine = create_db_engine(database_url)
    try:
        drop_all_tables(engine)
        print("Tables dropped.")
    finally:
        engine.dispose()


def reset_database(database_url: str) -> None:
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        drop_tables(database_url)
        create_tables(database_url)
    else:
        print("Database reset cancelled.")


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  create         - Create all tables")
        print("  drop           - Drop all tables")
        print("  reset          - Reset database (WARNING: drops all data)")
        return

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    database_url = get_settings().database_url
    command_name = sys.argv[1]

    if command_name == "create":
        create_tables(database_url)
    elif command_name == "drop":
        drop_tables(database_url)
    elif command_name == "reset":
        reset_database(database_url)
    else:
        print(f"Unknown command: {command_name}")


if __name__ == "__main__":
    main()
