# core/logger.py
from core.db import SessionLocal
from models.audit_log import AuditLog
from datetime import datetime

def log_action(user_email, action: str, session_factory=SessionLocal):
    """Record a booking or admin action into the audit log.

    Audit failures are reported on the console and never interrupt the caller.
    """
    session = session_factory()
    try:
        log = AuditLog(user_email=user_email, action=action, timestamp=datetime.utcnow())
        session.add(log)
        session.commit()
    except Exception as e:
        print("Audit log error:", e)
        session.rollback()
    finally:
        session.close()
