"""Database operations for candidates."""

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


def add_candidate(name: str, email: str, phone: str, skills: str) -> int:
    """Add a new candidate and return its candidate_id."""
    values = (
        require_text(name, 'name', NAME_MAX_LENGTH),
        require_text(email, 'email', EMAIL_MAX_LENGTH),
        require_text(phone, 'phone', PHONE_MAX_LENGTH),
        require_text(skills, 'skills'),
    )
    with get_db_connection() as conn:
        cursor = conn.execute("""
            INSERT INTO candidates (name, email, phone, skills)
            VALUES (?, ?, ?, ?)
        """, values)
        candidate_id = cursor.lastrowid
    logger.info(f"Added candidate {candidate_id}: {values[0]}")
    return candidate_id


def get_candidate(candidate_id: int) -> Optional[Dict[str, Any]]:
    """Get a candidate by ID."""
    with get_db_connection() as conn:
        row = conn.execute(
            "SELECT * FROM candidates WHERE candidate_id = ?", (candidate_id,)
        ).fetchone()
        return dict(row) if row else None


def get_all_candidates() -> List[Dict[str, Any]]:
    """Get all candidates ordered by ID."""
    with get_db_connection() as conn:
        rows = conn.execute("SELECT * FROM candidates ORDER BY candidate_id").fetchall()
        return [dict(row) for row in rows]


def delete_candidate(candidate_id: int) -> bool:
    """Delete a candidate and their applications. Jobs are left untouched."""
    with get_db_connection() as conn:
        cursor = conn.execute("DELETE FROM candidates WHERE candidate_id = ?", (candidate_id,))
        deleted = cursor.rowcount > 0
    if deleted:
        logger.info(f"Deleted candidate {candidate_id} and their applications")
    return deleted
