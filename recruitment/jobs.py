"""Database operations for job postings."""

import logging
from typing import Optional, List, Dict, Any, Union

from recruitment.connection import get_db_connection
from recruitment.models import (
    JobCategory,
    JobType,
    TITLE_MAX_LENGTH,
    LOCATION_MAX_LENGTH,
    coerce_enum,
    normalize_salary,
    optional_text,
    require_text,
)

logger = logging.getLogger(__name__)


def add_job(
    employer_id: int,
    title: str,
    category: Union[JobCategory, str],
    job_type: Union[JobType, str],
    salary: Optional[Any] = None,
    location: Optional[str] = None,
) -> int:
    """Add a new job posting and return its job_id.

    Raises:
        ReferentialIntegrityError: if the employer does not exist.
        InvalidFieldError: if category or job type is not a known value.
    """
    values = (
        employer_id,
        require_text(title, 'title', TITLE_MAX_LENGTH),
        coerce_enum(JobCategory, category, 'category').value,
        normalize_salary(salary),
        optional_text(location, 'location', LOCATION_MAX_LENGTH),
        coerce_enum(JobType, job_type, 'job_type').value,
    )
    with get_db_connection() as conn:
        cursor = conn.execute("""
            INSERT INTO jobs (employer_id, title, category, salary, location, job_type)
            VALUES (?, ?, ?, ?, ?, ?)
        """, values)
        job_id = cursor.lastrowid
    logger.info(f"Added job {job_id}: {values[1]} (employer {employer_id})")
    return job_id


def get_job(job_id: int) -> Optional[Dict[str, Any]]:
    """Get a job posting by ID."""
    with get_db_connection() as conn:
        row = conn.execute("SELECT * FROM jobs WHERE job_id = ?", (job_id,)).fetchone()
        return dict(row) if row else None


def get_all_jobs(
    employer_id: Optional[int] = None,
    job_type: Optional[Union[JobType, str]] = None,
) -> List[Dict[str, Any]]:
    """Get all job postings with optional filters, ordered by ID."""
    query = "SELECT * FROM jobs WHERE 1=1"
    params: List[Any] = []

    if employer_id is not None:
        query += " AND employer_id = ?"
        params.append(employer_id)

    if job_type is not None:
        query += " AND job_type = ?"
        params.append(coerce_enum(JobType, job_type, 'job_type').value)

    query += " ORDER BY job_id"

    with get_db_connection() as conn:
        return [dict(row) for row in conn.execute(query, params).fetchall()]


def delete_job(job_id: int) -> bool:
    """Delete a job posting and its applications."""
    with get_db_connection() as conn:
        cursor = conn.execute("DELETE FROM jobs WHERE job_id = ?", (job_id,))
        deleted = cursor.rowcount > 0
    if deleted:
        logger.info(f"Deleted job {job_id}")
    return deleted
