# core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

APP_NAME = os.getenv("APP_NAME", "Catering Booking")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///catering.db")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@catering.local")

# Seconds to wait on any backend call; 0 waits indefinitely
BACKEND_TIMEOUT_SECONDS = float(os.getenv("BACKEND_TIMEOUT_SECONDS", "30"))

MIN_GUEST_COUNT = int(os.getenv("MIN_GUEST_COUNT", "50"))

# Fallback rate sheet when the admin_charges row can't be read
DEFAULT_DELIVERY_CHARGE = float(os.getenv("DEFAULT_DELIVERY_CHARGE", "3000"))
DEFAULT_VESSEL_CHARGE = float(os.getenv("DEFAULT_VESSEL_CHARGE", "5000"))
DEFAULT_STAFF_CHARGE_PER_PERSON = float(os.getenv("DEFAULT_STAFF_CHARGE_PER_PERSON", "800"))
DEFAULT_GUESTS_PER_STAFF = int(os.getenv("DEFAULT_GUESTS_PER_STAFF", "50"))
DEFAULT_SERVICE_CHARGE_PERCENT = float(os.getenv("DEFAULT_SERVICE_CHARGE_PERCENT", "5"))

# Local runs only: put this user into the page session on startup
DEV_USER_EMAIL = os.getenv("DEV_USER_EMAIL")
