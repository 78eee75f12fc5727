"""
RealEstateTransaction Model - maps the real_estate transactions table

The table is owned by the upstream data load; this service only reads it.

  DB Column             Notes
  ─────────────────────────────────────────────────────────────
  area_name_en          Area / community name, nullable
  property_type_en      e.g. "Unit", "Land", "Building"
  property_usage_en     e.g. "Residential", "Commercial"
  rooms_en              e.g. "1 B/R", "Studio"
  actual_worth          Transacted worth in AED
  instance_date         Transaction date
"""
from constants import TRANSACTIONS_TABLE
from models.database import db


class RealEstateTransaction(db.Model):
    __tablename__ = TRANSACTIONS_TABLE

    id = db.Column(db.Integer, primary_key=True)

    area_name_en = db.Column(db.String(255), index=True)
    property_type_en = db.Column(db.String(100), index=True)
    property_usage_en = db.Column(db.String(100), index=True)
    rooms_en = db.Column(db.String(100))

    actual_worth = db.Column(db.Float)
    instance_date = db.Column(db.Date, index=True)

    def __repr__(self):
        return f"<RealEstateTransaction {self.id} {self.area_name_en} {self.actual_worth}>"
