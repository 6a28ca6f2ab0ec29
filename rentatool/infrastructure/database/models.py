"""SQLAlchemy ORM models for the tool inventory"""

from sqlalchemy import Column, String, Boolean, Numeric, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class ToolRecord(Base):
    """Rentable tool with its charge policy and checkout status"""

    __tablename__ = "tool"

    code = Column(String(16), primary_key=True)
    type = Column(String(64), nullable=False)
    brand = Column(String(64), nullable=False)
    daily_charge = Column(Numeric(10, 2), nullable=False)
    charge_on_weekdays = Column(Boolean, nullable=False, default=True)
    charge_on_weekends = Column(Boolean, nullable=False, default=False)
    charge_on_holidays = Column(Boolean, nullable=False, default=False)
    checked_out = Column(Boolean, nullable=False, default=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
