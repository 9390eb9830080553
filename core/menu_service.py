# core/menu_service.py
from sqlalchemy.orm import Session
from models.menu_item import MenuItem

FOOD_TYPES = ["veg", "non_veg", "platter"]

FOOD_TYPE_LABELS = {
    "veg": "Veg",
    "non_veg": "Non-Veg",
    "platter": "Platter",
}


def normalize_food_type(value) -> str:
    """Items saved without a recognised food type are listed as veg."""
    return value if value in FOOD_TYPES else "veg"


def get_available_menu_items(db: Session):
    """Get every bookable menu item, ordered by name"""
    return (
        db.query(MenuItem)
        .filter(MenuItem.is_available == True)  # noqa: E712
        .order_by(MenuItem.name)
        .all()
    )


def filter_items_by_type(items, food_type: str):
    return [item for item in items if normalize_food_type(item.food_type) == food_type]


def get_food_type_label(food_type: str) -> str:
    return FOOD_TYPE_LABELS.get(food_type, food_type)
