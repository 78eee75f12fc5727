"""
Pytest configuration for backend tests.

Provides:
- Shared fixtures (app, client) on an in-memory SQLite database
- seed fixture with a small real_estate dataset covering blank categories,
  zero/None prices and missing dates
"""

import sys
from datetime import date
from pathlib import Path

# Add backend directory to Python path so imports like
# `from services.pivot import ...` and `from utils.normalize import ...` work
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

import pytest


# (area, property type, usage, rooms, worth AED, date)
SEED_ROWS = [
    ("Marina", "Unit", "Residential", "1 B/R", 3_670_000, date(2021, 3, 15)),
    ("Marina", "Unit", "Residential", "2 B/R", 7_340_000, date(2021, 3, 20)),
    ("Marina", "Villa", "Residential", "3 B/R", 11_010_000, date(2022, 6, 1)),
    ("Marina", "Land", "Commercial", "", 3_670, date(2022, 7, 10)),
    ("Downtown", "Unit", "Residential", "Studio", 36_700_000, date(2021, 5, 5)),
    ("Downtown", "Unit", "Commercial", None, 0, date(2022, 1, 1)),
    ("Jumeirah", "Villa", "Residential", "4 B/R", 18_350_000, date(2020, 12, 31)),
    ("", "Unit", "Residential", "1 B/R", 3_670_000, date(2022, 2, 2)),
    (None, "Land", "", None, None, None),
]


@pytest.fixture
def app():
    """Create test Flask application with an empty real_estate table."""
    from app import create_app
    from config import TestConfig
    from models.database import db

    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def seed(app):
    """Insert SEED_ROWS into real_estate."""
    from models import RealEstateTransaction, db

    db.session.add_all([
        RealEstateTransaction(
            area_name_en=area,
            property_type_en=property_type,
            property_usage_en=usage,
            rooms_en=rooms,
            actual_worth=worth,
            instance_date=instance_date,
        )
        for area, property_type, usage, rooms, worth, instance_date in SEED_ROWS
    ])
    db.session.commit()
    return SEED_ROWS
