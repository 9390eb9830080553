# models/admin_charges.py
from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey
from datetime import datetime
from core.db import Base

class AdminCharges(Base):
    """Singleton rate sheet applied to every booking."""
    __tablename__ = "admin_charges"

    id = Column(Integer, primary_key=True, index=True)
    delivery_charge = Column(Float, nullable=False, default=0)
    vessel_charge = Column(Float, nullable=False, default=0)
    staff_charge_per_person = Column(Float, nullable=False, default=0)
    guests_per_staff = Column(Integer, nullable=False, default=50)
    service_charge_percent = Column(Float, nullable=False, default=0)
    updated_at = Column(DateTime, default=datetime.utcnow)
    updated_by = Column(Integer, ForeignKey("users.id"), nullable=True)
