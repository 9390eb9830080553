from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from core.db import Base

class User(Base):
    """Identity record; credentials live with the auth provider."""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    role = Column(String, default="customer")  # admin, manager, staff, customer
    created_at = Column(DateTime, default=datetime.utcnow)
