"""Analytical read queries over job postings.

Each function runs one query and returns plain dictionaries. Orderings use
salary descending; jobs without a disclosed salary sort last.
"""

import logging
from typing import List, Dict, Any, Optional, Union

from recruitment.connection import get_db_connection
from recruitment.models import JobCategory, coerce_enum

logger = logging.getLogger(__name__)

NOT_DISCLOSED = "Not Disclosed"

HIGH_SALARY_THRESHOLD = 75000
MEDIUM_SALARY_THRESHOLD = 50000

SALARY_GROUPS = 4


def get_top_paid_jobs_per_employer() -> List[Dict[str, Any]]:
    """Highest-paid job(s) of each employer, via a correlated subquery."""
    with get_db_connection() as conn:
        rows = conn.execute("""
            SELECT j1.title, j1.salary, j1.employer_id
            FROM jobs j1
            WHERE j1.salary = (
                SELECT MAX(j2.salary) FROM jobs j2
                WHERE j2.employer_id = j1.employer_id
            )
            ORDER BY j1.employer_id, j1.job_id
        """).fetchall()
        return [dict(row) for row in rows]


def get_salary_display() -> List[Dict[str, Any]]:
    """Job titles with salary formatted to two decimals, or "Not Disclosed"."""
    with get_db_connection() as conn:
        rows = conn.execute("""
            SELECT title,
                   COALESCE(
                       CASE WHEN salary IS NOT NULL THEN printf('%.2f', salary) END,
                       ?
                   ) AS salary
            FROM jobs
            ORDER BY job_id
        """, (NOT_DISCLOSED,)).fetchall()
        return [dict(row) for row in rows]


def get_salary_range(category: Union[JobCategory, str] = JobCategory.IT) -> Dict[str, Optional[float]]:
    """Highest and lowest salary within a category."""
    category = coerce_enum(JobCategory, category, 'category')
    with get_db_connection() as conn:
        row = conn.execute("""
            SELECT MAX(salary) AS highest_salary, MIN(salary) AS lowest_salary
            FROM jobs
            WHERE category = ?
        """, (category.value,)).fetchone()
        return dict(row)


def get_salary_rankings() -> List[Dict[str, Any]]:
    """Window-function ranking of every job by salary.

    ``salary_rank`` and ``salary_dense_rank`` share a rank between equal
    salaries; the remaining columns break ties by job_id.
    """
    with get_db_connection() as conn:
        rows = conn.execute(f"""
            SELECT job_id, title, salary,
                   RANK() OVER by_salary AS salary_rank,
                   DENSE_RANK() OVER by_salary AS salary_dense_rank,
                   LAG(salary) OVER by_salary_id AS previous_salary,
                   LEAD(salary) OVER by_salary_id AS next_salary,
                   NTILE({SALARY_GROUPS}) OVER by_salary_id AS salary_group,
                   PERCENT_RANK() OVER by_salary AS salary_percentile,
                   ROW_NUMBER() OVER by_salary_id AS row_num
            FROM jobs
            WINDOW by_salary AS (ORDER BY salary DESC),
                   by_salary_id AS (ORDER BY salary DESC, job_id)
            ORDER BY row_num
        """).fetchall()
        return [dict(row) for row in rows]


def get_salary_tiers() -> List[Dict[str, Any]]:
    """Classify each job as High, Medium or Low salary.

    Jobs without a salary fall into the Low tier.
    """
    with get_db_connection() as conn:
        rows = conn.execute("""
            SELECT title, salary,
                   CASE
                       WHEN salary > ? THEN 'High Salary'
                       WHEN salary BETWEEN ? AND ? THEN 'Medium Salary'
                       ELSE 'Low Salary'
                   END AS salary_category
            FROM jobs
            ORDER BY job_id
        """, (HIGH_SALARY_THRESHOLD, MEDIUM_SALARY_THRESHOLD, HIGH_SALARY_THRESHOLD)).fetchall()
        return [dict(row) for row in rows]


def count_jobs_by_category() -> List[Dict[str, Any]]:
    """Job count per category followed by a grand-total row (``category`` None).

    Categories appear in declaration order of ``JobCategory``; categories
    without jobs are omitted, and an empty table yields no rows at all.
    """
    order = " ".join(
        f"WHEN '{member.value}' THEN {position}" for position, member in enumerate(JobCategory)
    )
    with get_db_connection() as conn:
        rows = conn.execute(f"""
            SELECT category, total_jobs FROM (
                SELECT category, COUNT(*) AS total_jobs,
                       CASE category {order} END AS position
                FROM jobs
                GROUP BY category
                UNION ALL
                SELECT NULL, COUNT(*), {len(JobCategory)}
                FROM jobs
            )
            ORDER BY position
        """).fetchall()
    results = [dict(row) for row in rows]
    if results and results[-1]['total_jobs'] == 0:
        return []
    return results
