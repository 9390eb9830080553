import pytest

from core.charges_service import (
    get_admin_charges, load_charge_settings, parse_charge_form, update_admin_charges
)
from core.pricing_service import DEFAULT_CHARGES
from models.admin_charges import AdminCharges
from models.audit_log import AuditLog

ADMIN = {"id": 1, "email": "admin@catering.local", "full_name": "Admin User", "role": "admin"}
MANAGER = {"id": 2, "email": "manager@catering.local", "full_name": "Kitchen Manager", "role": "manager"}

VALID = {
    "delivery_charge": 2500.0,
    "vessel_charge": 4000.0,
    "staff_charge_per_person": 900.0,
    "guests_per_staff": 40,
    "service_charge_percent": 7.5,
}


def test_get_admin_charges_returns_none_without_row(db):
    assert get_admin_charges(db) is None


def test_admin_saves_charges_creating_row(db):
    ok, message = update_admin_charges(db, ADMIN, VALID)

    assert ok is True
    assert message == "Charges updated successfully!"
    row = get_admin_charges(db)
    assert row.guests_per_staff == 40
    assert row.service_charge_percent == 7.5
    assert row.updated_by == 1
    assert row.updated_at is not None
    log = db.query(AuditLog).one()
    assert log.user_email == "admin@catering.local"
    assert "guests_per_staff=40" in log.action


def test_admin_update_overwrites_existing_row(db):
    db.add(AdminCharges(delivery_charge=1, vessel_charge=1, staff_charge_per_person=1,
                        guests_per_staff=10, service_charge_percent=1))
    db.commit()

    update_admin_charges(db, ADMIN, VALID)

    assert db.query(AdminCharges).count() == 1
    assert get_admin_charges(db).delivery_charge == 2500.0


@pytest.mark.parametrize("user", [MANAGER, {"id": 3, "role": "customer"}, None])
def test_only_admins_can_save(db, user):
    ok, message = update_admin_charges(db, user, VALID)

    assert ok is False
    assert message == "Failed to save charges. Make sure you have admin permissions."
    assert get_admin_charges(db) is None


@pytest.mark.parametrize("field, value, message", [
    ("guests_per_staff", 0, "Guests per staff must be at least 1."),
    ("service_charge_percent", 120, "Service charge must be between 0 and 100%."),
    ("vessel_charge", -10, "Vessel charge cannot be negative."),
])
def test_invalid_rates_are_refused(db, field, value, message):
    values = dict(VALID, **{field: value})

    assert update_admin_charges(db, ADMIN, values) == (False, message)
    assert get_admin_charges(db) is None


def test_parse_charge_form_converts_strings():
    raw = {
        "delivery_charge": "2500",
        "vessel_charge": " 4000.50 ",
        "staff_charge_per_person": "900",
        "guests_per_staff": "40",
        "service_charge_percent": "7.5",
    }

    values, error = parse_charge_form(raw)

    assert error is None
    assert values == {
        "delivery_charge": 2500.0,
        "vessel_charge": 4000.5,
        "staff_charge_per_person": 900.0,
        "guests_per_staff": 40,
        "service_charge_percent": 7.5,
    }


@pytest.mark.parametrize("field, raw, message", [
    ("delivery_charge", "abc", "Delivery charge must be a number."),
    ("guests_per_staff", "2.5", "Guests per staff must be a number."),
    ("service_charge_percent", "", "Service charge (%) must be a number."),
])
def test_parse_charge_form_reports_bad_field(field, raw, message):
    form = {key: str(value) for key, value in VALID.items()}
    form[field] = raw

    assert parse_charge_form(form) == (None, message)


def test_load_charge_settings_prefers_stored_row(db):
    update_admin_charges(db, ADMIN, VALID)

    charges, error = load_charge_settings(db)

    assert error is None
    assert charges.guests_per_staff == 40


def test_load_charge_settings_without_row_uses_defaults(db):
    assert load_charge_settings(db) == (DEFAULT_CHARGES, None)


def test_load_charge_settings_read_failure_falls_back(db):
    AdminCharges.__table__.drop(bind=db.get_bind())

    charges, error = load_charge_settings(db)

    assert charges == DEFAULT_CHARGES
    assert error == "Failed to load charges"


def test_charge_audit_entry_uses_given_session_factory(db, session_factory):
    update_admin_charges(db, ADMIN, VALID, session_factory=session_factory)

    log = db.query(AuditLog).one()
    assert log.user_email == "admin@catering.local"
    assert log.action.startswith("Updated admin charges: delivery_charge=2500.0")
    assert log.timestamp is not None


def test_audit_failure_does_not_undo_saved_charges(db):
    ok, _ = update_admin_charges(db, ADMIN, VALID, session_factory=BrokenSession)

    assert ok is True
    assert get_admin_charges(db).delivery_charge == 2500.0
    assert db.query(AuditLog).count() == 0


class BrokenSession:
    def add(self, obj):
        raise RuntimeError("audit table unavailable")

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass
