"""Database operations for job applications.

A candidate may hold at most ``get_pending_limit()`` Pending applications,
the limit set by ``init_database``. The limit is checked and the row
written inside one ``BEGIN IMMEDIATE`` transaction (see
``get_db_connection``), so two concurrent inserts for the same candidate
are serialized: the second one sees the first one's row in its count.
The ``before_application_insert`` trigger applies the same rule to writes
made outside this module.
"""

import sqlite3
import logging
from typing import Optional, List, Dict, Any, Union

from recruitment.connection import get_db_connection, get_pending_limit
from recruitment.errors import PendingLimitExceeded
from recruitment.models import ApplicationStatus, PENDING_LIMIT_MESSAGE, coerce_enum

logger = logging.getLogger(__name__)


def _count_pending(conn: sqlite3.Connection, candidate_id: int) -> int:
    row = conn.execute("""
        SELECT COUNT(*) FROM applications
        WHERE candidate_id = ? AND status = ?
    """, (candidate_id, ApplicationStatus.PENDING.value)).fetchone()
    return row[0]


def check_pending_limit(conn: sqlite3.Connection, candidate_id: int):
    limit = get_pending_limit()
    if _count_pending(conn, candidate_id) >= limit:
        raise PendingLimitExceeded(PENDING_LIMIT_MESSAGE.format(limit=limit))


def add_application(
    job_id: int,
    candidate_id: int,
    status: Union[ApplicationStatus, str] = ApplicationStatus.PENDING,
) -> int:
    """Add a new application and return its application_id.

    Raises:
        PendingLimitExceeded: if the candidate already has the maximum
            number of Pending applications. Nothing is written.
        ReferentialIntegrityError: if the job or candidate does not exist.
    """
    status = coerce_enum(ApplicationStatus, status, 'status')
    with get_db_connection() as conn:
        check_pending_limit(conn, candidate_id)
        cursor = conn.execute("""
            INSERT INTO applications (job_id, candidate_id, status)
            VALUES (?, ?, ?)
        """, (job_id, candidate_id, status.value))
        application_id = cursor.lastrowid
    logger.info(
        f"Added application {application_id}: candidate {candidate_id} -> job {job_id} ({status.value})"
    )
    return application_id


def get_application(application_id: int) -> Optional[Dict[str, Any]]:
    """Get an application by ID."""
    with get_db_connection() as conn:
        row = conn.execute(
            "SELECT * FROM applications WHERE application_id = ?", (application_id,)
        ).fetchone()
        return dict(row) if row else None


def get_applications(
    candidate_id: Optional[int] = None,
    job_id: Optional[int] = None,
    status: Optional[Union[ApplicationStatus, str]] = None,
) -> List[Dict[str, Any]]:
    """Get applications with optional filters, ordered by ID."""
    query = "SELECT * FROM applications WHERE 1=1"
    params: List[Any] = []

    if candidate_id is not None:
        query += " AND candidate_id = ?"
        params.append(candidate_id)

    if job_id is not None:
        query += " AND job_id = ?"
        params.append(job_id)

    if status is not None:
        query += " AND status = ?"
        params.append(coerce_enum(ApplicationStatus, status, 'status').value)

    query += " ORDER BY application_id"

    with get_db_connection() as conn:
        return [dict(row) for row in conn.execute(query, params).fetchall()]


def count_pending_applications(candidate_id: int) -> int:
    """Number of Pending applications currently held by a candidate."""
    with get_db_connection() as conn:
        return _count_pending(conn, candidate_id)


def update_application_status(application_id: int, status: Union[ApplicationStatus, str]) -> bool:
    """Change an application's status.

    Moving an application back to Pending is subject to the same limit as
    inserting a new one.
    """
    status = coerce_enum(ApplicationStatus, status, 'status')
    with get_db_connection() as conn:
        row = conn.execute(
            "SELECT candidate_id, status FROM applications WHERE application_id = ?",
            (application_id,)
        ).fetchone()
        if row is None:
            logger.warning(f"Application {application_id} not found")
            return False

        if row['status'] == status.value:
            return True

        if status is ApplicationStatus.PENDING:
            check_pending_limit(conn, row['candidate_id'])

        conn.execute(
            "UPDATE applications SET status = ? WHERE application_id = ?",
            (status.value, application_id)
        )
    logger.info(f"Application {application_id}: {row['status']} -> {status.value}")
    return True


def delete_application(application_id: int) -> bool:
    """Delete an application."""
    with get_db_connection() as conn:
        cursor = conn.execute("DELETE FROM applications WHERE application_id = ?", (application_id,))
        return cursor.rowcount > 0
