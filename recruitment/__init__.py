"""Job recruitment database: employers, jobs, candidates and applications."""

from .errors import (
    RecruitmentError,
    ReferentialIntegrityError,
    PendingLimitExceeded,
    DuplicateRecordError,
    InvalidFieldError,
)
from .models import JobCategory, JobType, ApplicationStatus
from .connection import get_db_connection, get_pending_limit, init_database
from .employers import add_employer, get_employer, get_all_employers, delete_employer
from .jobs import add_job, get_job, get_all_jobs, delete_job
from .candidates import add_candidate, get_candidate, get_all_candidates, delete_candidate
from .applications import (
    add_application,
    get_application,
    get_applications,
    count_pending_applications,
    update_application_status,
    delete_application,
)
from .listings import get_job_listings, get_jobs_by_category
from .analytics import (
    get_top_paid_jobs_per_employer,
    get_salary_display,
    get_salary_range,
    get_salary_rankings,
    get_salary_tiers,
    count_jobs_by_category,
)
from .seed import seed_sample_data

__all__ = [
    "RecruitmentError",
    "ReferentialIntegrityError",
    "PendingLimitExceeded",
    "DuplicateRecordError",
    "InvalidFieldError",
    "JobCategory",
    "JobType",
    "ApplicationStatus",
    "get_db_connection",
    "init_database",
    "get_pending_limit",
    "add_employer",
    "get_employer",
    "get_all_employers",
    "delete_employer",
    "add_job",
    "get_job",
    "get_all_jobs",
    "delete_job",
    "add_candidate",
    "get_candidate",
    "get_all_candidates",
    "delete_candidate",
    "add_application",
    "get_application",
    "get_applications",
    "count_pending_applications",
    "update_application_status",
    "delete_application",
    "get_job_listings",
    "get_jobs_by_category",
    "get_top_paid_jobs_per_employer",
    "get_salary_display",
    "get_salary_range",
    "get_salary_rankings",
    "get_salary_tiers",
    "count_jobs_by_category",
    "seed_sample_data",
]
