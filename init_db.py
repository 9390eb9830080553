from core.db import Base, engine, SessionLocal
from core.config import ADMIN_EMAIL
from models.user import User
from models.menu_item import MenuItem
from models.customer import Customer
from models.order import Order, OrderItem
from models.admin_charges import AdminCharges
from models.audit_log import AuditLog
from core.pricing_service import DEFAULT_CHARGES

def seed_users(db):
    existing = db.query(User).first()
    if not existing:
        db.add_all([
            User(full_name="Admin User", email=ADMIN_EMAIL, role="admin"),
            User(full_name="Kitchen Manager", email="manager@catering.local", role="manager"),
            User(full_name="Sample Customer", email="customer@catering.local", role="customer"),
        ])
        db.commit()
        print(f"✅ Identity records created (admin: {ADMIN_EMAIL})")
    else:
        print("Users already exist.")

def seed_menu_items(db):
    existing = db.query(MenuItem).first()
    if not existing:
        sample_items = [
            MenuItem(name="Paneer Butter Masala", description="Cottage cheese in a rich tomato gravy.", food_type="veg", price=180.0),
            MenuItem(name="Veg Biryani", description="Basmati rice layered with spiced vegetables.", food_type="veg", price=150.0),
            MenuItem(name="Dal Makhani", description="Slow cooked black lentils with butter.", food_type="veg", price=120.0),
            MenuItem(name="Chicken Biryani", description="Hyderabadi dum biryani.", food_type="non_veg", price=220.0),
            MenuItem(name="Mutton Rogan Josh", description="Kashmiri style lamb curry.", food_type="non_veg", price=320.0),
            MenuItem(name="Fish Fry", description="Crisp masala fried fish.", food_type="non_veg", price=260.0),
            MenuItem(name="South Indian Platter", description="Idli, vada, dosa, sambar and chutneys.", food_type="platter", price=250.0),
            MenuItem(name="Dessert Platter", description="Gulab jamun, rasmalai and halwa.", food_type="platter", price=140.0),
            MenuItem(name="Seasonal Special", description="Chef's pick, currently unavailable.", food_type="veg", price=200.0, is_available=False),
        ]
        db.add_all(sample_items)
        db.commit()
        print("Sample menu items seeded.")
    else:
        print("Menu items already seeded.")

def seed_admin_charges(db):
    if not db.query(AdminCharges).first():
        db.add(AdminCharges(
            delivery_charge=DEFAULT_CHARGES.delivery_charge,
            vessel_charge=DEFAULT_CHARGES.vessel_charge,
            staff_charge_per_person=DEFAULT_CHARGES.staff_charge_per_person,
            guests_per_staff=DEFAULT_CHARGES.guests_per_staff,
            service_charge_percent=DEFAULT_CHARGES.service_charge_percent,
        ))
        db.commit()
        print("Default admin charges created.")
    else:
        print("Admin charges already exist.")

def init_db():
    print("Rebuilding database (drop/create)...")
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("All tables created:")
    for table in Base.metadata.sorted_tables:
        print(f"   - {table.name}")

    db = SessionLocal()
    try:
        seed_users(db)
        seed_menu_items(db)
        seed_admin_charges(db)
    finally:
        db.close()
    print("\nDatabase initialization complete!")
    print(f"Set DEV_USER_EMAIL={ADMIN_EMAIL} in .env to sign in locally as admin")

if __name__ == "__main__":
    init_db()
