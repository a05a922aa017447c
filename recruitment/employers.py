"""Database operations for employers."""

import logging
from typing import Optional, List, Dict, Any

from recruitment.connection import get_db_connection
from recruitment.models import (
    NAME_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    require_text,
)

logger = logging.getLogger(__name__)


def add_employer(name: str, email: str, phone: str, company_name: str) -> int:
    """Add a new employer and return its employer_id.

    Raises:
        DuplicateRecordError: if the email is already registered.
        InvalidFieldError: if a required field is empty or too long.
    """
    values = (
        require_text(name, 'name', NAME_MAX_LENGTH),
        require_text(email, 'email', EMAIL_MAX_LENGTH),
        require_text(phone, 'phone', PHONE_MAX_LENGTH),
        require_text(company_name, 'company_name', NAME_MAX_LENGTH),
    )
    with get_db_connection() as conn:
        cursor = conn.execute("""
            INSERT INTO employers (name, email, phone, company_name)
            VALUES (?, ?, ?, ?)
        """, values)
        employer_id = cursor.lastrowid
    logger.info(f"Added employer {employer_id}: {values[3]}")
    return employer_id


def get_employer(employer_id: int) -> Optional[Dict[str, Any]]:
    """Get an employer by ID."""
    with get_db_connection() as conn:
        row = conn.execute(
            "SELECT * FROM employers WHERE employer_id = ?", (employer_id,)
        ).fetchone()
        return dict(row) if row else None


def get_all_employers() -> List[Dict[str, Any]]:
    """Get all employers ordered by ID."""
    with get_db_connection() as conn:
        rows = conn.execute("SELECT * FROM employers ORDER BY employer_id").fetchall()
        return [dict(row) for row in rows]


def delete_employer(employer_id: int) -> bool:
    """Delete an employer together with its jobs and their applications."""
    with get_db_connection() as conn:
        cursor = conn.execute("DELETE FROM employers WHERE employer_id = ?", (employer_id,))
        deleted = cursor.rowcount > 0
    if deleted:
        logger.info(f"Deleted employer {employer_id} and its jobs")
    else:
        logger.debug(f"Employer {employer_id} not found, nothing deleted")
    return deleted
