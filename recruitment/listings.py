"""Read-only job listing queries: the listings view and the category filter."""

import logging
from enum import Enum
from typing import List, Dict, Any

from recruitment.connection import get_db_connection

logger = logging.getLogger(__name__)


def get_job_listings() -> List[Dict[str, Any]]:
    """Rows of the ``job_listings`` view: title, salary and company name."""
    with get_db_connection() as conn:
        rows = conn.execute("SELECT title, salary, company_name FROM job_listings").fetchall()
        return [dict(row) for row in rows]


def get_jobs_by_category(category: Any) -> List[Dict[str, Any]]:
    """All jobs whose category equals ``category``, ignoring case.

    Unknown categories simply match nothing.
    """
    if isinstance(category, Enum):
        category = category.value
    elif category is not None:
        category = str(category).strip()

    with get_db_connection() as conn:
        rows = conn.execute(
            "SELECT * FROM jobs WHERE category = ? COLLATE NOCASE ORDER BY job_id",
            (category,)
        ).fetchall()
    logger.debug(f"Category {category!r}: {len(rows)} jobs")
    return [dict(row) for row in rows]
