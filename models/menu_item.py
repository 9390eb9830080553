# models/menu_item.py
from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime
from datetime import datetime
from core.db import Base

class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    price = Column(Float, nullable=False)  # per plate
    is_available = Column(Boolean, default=True)
    food_type = Column(String, nullable=True)  # veg, non_veg, platter
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<MenuItem {self.name} ({self.food_type}) {self.price}>"
