"""
Models package - SQLAlchemy models
"""
from models.database import db
from models.transaction import RealEstateTransaction

__all__ = [
    'db',
    'RealEstateTransaction',
]
