"""Sample recruitment data for demos and manual testing."""

import sqlite3
import logging
from typing import Dict

from recruitment.connection import get_db_connection
from recruitment.applications import check_pending_limit
from recruitment.models import ApplicationStatus, JobCategory, JobType

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYERS = [
    {'name': 'John Doe', 'email': 'john@company.com', 'phone': '9876543210',
     'company_name': 'Tech Solutions'},
    {'name': 'Alice Smith', 'email': 'alice@finance.com', 'phone': '8765432109',
     'company_name': 'Finance Experts'},
]

# employer is an index into SAMPLE_EMPLOYERS
SAMPLE_JOBS = [
    {'employer': 0, 'title': 'Software Engineer', 'category': JobCategory.IT,
     'salary': 80000, 'location': 'New York', 'job_type': JobType.FULL_TIME},
    {'employer': 0, 'title': 'Web Developer', 'category': JobCategory.IT,
     'salary': 70000, 'location': 'San Francisco', 'job_type': JobType.REMOTE},
    {'employer': 1, 'title': 'Accountant', 'category': JobCategory.FINANCE,
     'salary': 60000, 'location': 'Los Angeles', 'job_type': JobType.FULL_TIME},
]

SAMPLE_CANDIDATES = [
    {'name': 'Mike Johnson', 'email': 'mike@gmail.com', 'phone': '7654321098',
     'skills': 'Python, Java, SQL'},
    {'name': 'Emma Brown', 'email': 'emma@gmail.com', 'phone': '6543210987',
     'skills': 'Accounting, Excel, Finance'},
]

# (job index, candidate index, status)
SAMPLE_APPLICATIONS = [
    (0, 0, ApplicationStatus.PENDING),
    (1, 0, ApplicationStatus.ACCEPTED),
    (2, 1, ApplicationStatus.REJECTED),
]


def _is_empty(conn: sqlite3.Connection) -> bool:
    row = conn.execute("""
        SELECT (SELECT COUNT(*) FROM employers)
             + (SELECT COUNT(*) FROM jobs)
             + (SELECT COUNT(*) FROM candidates)
             + (SELECT COUNT(*) FROM applications)
    """).fetchone()
    return row[0] == 0


def is_empty() -> bool:
    """True when none of the recruitment tables hold any rows."""
    with get_db_connection() as conn:
        return _is_empty(conn)


def seed_sample_data() -> Dict[str, int]:
    """Insert the sample data set into an empty database.

    The emptiness check and every insert share one transaction: either the
    whole set is written or nothing is. Returns the number of rows inserted
    per table; all zero when the database already holds data.
    """
    counts = {'employers': 0, 'jobs': 0, 'candidates': 0, 'applications': 0}
    with get_db_connection() as conn:
        if not _is_empty(conn):
            logger.info("Database already contains data, skipping sample data")
            return counts

        employer_ids = []
        for employer in SAMPLE_EMPLOYERS:
            cursor = conn.execute("""
                INSERT INTO employers (name, email, phone, company_name)
                VALUES (:name, :email, :phone, :company_name)
            """, employer)
            employer_ids.append(cursor.lastrowid)

        job_ids = []
        for job in SAMPLE_JOBS:
            cursor = conn.execute("""
                INSERT INTO jobs (employer_id, title, category, salary, location, job_type)
                VALUES (?, ?, ?, ?, ?, ?)
            """, (
                employer_ids[job['employer']],
                job['title'],
                job['category'].value,
                job['salary'],
                job['location'],
                job['job_type'].value,
            ))
            job_ids.append(cursor.lastrowid)

        candidate_ids = []
        for candidate in SAMPLE_CANDIDATES:
            cursor = conn.execute("""
                INSERT INTO candidates (name, email, phone, skills)
                VALUES (:name, :email, :phone, :skills)
            """, candidate)
            candidate_ids.append(cursor.lastrowid)

        for job_index, candidate_index, status in SAMPLE_APPLICATIONS:
            candidate_id = candidate_ids[candidate_index]
            check_pending_limit(conn, candidate_id)
            conn.execute("""
                INSERT INTO applications (job_id, candidate_id, status)
                VALUES (?, ?, ?)
            """, (job_ids[job_index], candidate_id, status.value))

        counts = {
            'employers': len(employer_ids),
            'jobs': len(job_ids),
            'candidates': len(candidate_ids),
            'applications': len(SAMPLE_APPLICATIONS),
        }
    logger.info(f"Sample data inserted: {counts}")
    return counts
