#!/usr/bin/env python3
"""
Creates the tables and seeds the demo hospital.
Run with: python init_db.py
"""
import sys
from pathlib import Path

# Make the app package importable when run as a script
sys.path.insert(0, str(Path(__file__).parent))

from app.core.database import create_db_and_tables, get_session_direct
from app.utils.init_data import initialize_data, DEMO_STAFF
from app.utils.logger import configure_logging


def main():
    """Initializes the database with demo data."""
    logger = configure_logging()
    logger.info("Initializing database")

    create_db_and_tables()
    session = get_session_direct()
    try:
        initialize_data(session)
    except Exception:
        session.rollback()
        logger.exception("Database initialization failed")
        sys.exit(1)
    finally:
        session.close()

    print("=" * 60)
    print("DEMO CREDENTIALS")
    print("=" * 60)
    for staff in DEMO_STAFF:
        if staff["email"]:
            print(f"  {staff['role'].value:<10} {staff['email']} / {staff['password']}")
    print("=" * 60)


if __name__ == "__main__":
    main()
