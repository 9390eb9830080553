# core/charges_service.py
from sqlalchemy.orm import Session, sessionmaker
from models.admin_charges import AdminCharges
from core.identity import is_admin
from core.logger import log_action
from core.pricing_service import DEFAULT_CHARGES
from datetime import datetime

CHARGE_FIELDS = [
    "delivery_charge",
    "vessel_charge",
    "staff_charge_per_person",
    "guests_per_staff",
    "service_charge_percent",
]

CHARGE_LABELS = {
    "delivery_charge": "Delivery charge",
    "vessel_charge": "Vessel charge",
    "staff_charge_per_person": "Staff charge per person",
    "guests_per_staff": "Guests per staff",
    "service_charge_percent": "Service charge (%)",
}


def get_admin_charges(db: Session):
    """Fetch the single admin_charges row, or None if it was never created."""
    return db.query(AdminCharges).order_by(AdminCharges.id).first()


def load_charge_settings(db: Session):
    """
    Rate sheet for the settings form.

    Returns:
        (row or DEFAULT_CHARGES, None), or (DEFAULT_CHARGES, error message) if the read fails
    """
    try:
        return get_admin_charges(db) or DEFAULT_CHARGES, None
    except Exception as e:
        print("Error fetching charges:", e)
        db.rollback()
        return DEFAULT_CHARGES, "Failed to load charges"


def parse_charge_form(raw: dict):
    """
    Turn settings form strings into numbers.

    Returns:
        (values, None) on success or (None, error message)
    """
    values = {}
    for field in CHARGE_FIELDS:
        text = str(raw.get(field, "")).strip()
        try:
            values[field] = int(text) if field == "guests_per_staff" else float(text)
        except ValueError:
            return None, f"{CHARGE_LABELS[field]} must be a number."
    return values, None


def validate_charges(values: dict):
    for field in ("delivery_charge", "vessel_charge", "staff_charge_per_person"):
        if values[field] < 0:
            return f"{CHARGE_LABELS[field]} cannot be negative."
    if values["guests_per_staff"] <= 0:
        return "Guests per staff must be at least 1."
    if not 0 <= values["service_charge_percent"] <= 100:
        return "Service charge must be between 0 and 100%."
    return None


def update_admin_charges(db: Session, user_data: dict, values: dict, session_factory=None):
    """Save the rate sheet. Only admins may change it.

    The audit entry goes through log_action on its own session (same engine as `db` by default).
    """
    if not is_admin(user_data):
        return False, "Failed to save charges. Make sure you have admin permissions."

    error = validate_charges(values)
    if error:
        return False, error

    charges = get_admin_charges(db)
    if not charges:
        charges = AdminCharges()
        db.add(charges)

    for field in CHARGE_FIELDS:
        setattr(charges, field, values[field])
    charges.updated_at = datetime.utcnow()
    charges.updated_by = user_data.get("id")
    db.commit()

    summary = ", ".join(f"{field}={values[field]}" for field in CHARGE_FIELDS)
    log_action(
        user_data.get("email"),
        f"Updated admin charges: {summary}",
        session_factory=session_factory or sessionmaker(bind=db.get_bind()),
    )
    return True, "Charges updated successfully!"
