"""Database schema definitions and enumerations for the recruitment tables."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Any, Optional, Type, TypeVar, Union

from recruitment.errors import InvalidFieldError


# ==================== Enums ===================== #
class JobCategory(str, Enum):
    """Job category. Declaration order is the grouping order for reports."""

    IT = "IT"
    FINANCE = "Finance"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    OTHERS = "Others"


class JobType(str, Enum):
    """Job employment type."""

    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    REMOTE = "Remote"


class ApplicationStatus(str, Enum):
    """Application status."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: Type[E], value: Union[E, str, None], field: str) -> E:
    """Return the enum member matching ``value``, ignoring case.

    Raises:
        InvalidFieldError: if the value is missing or not a member.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        wanted = value.strip().lower()
        for member in enum_cls:
            if member.value.lower() == wanted:
                return member
    allowed = ", ".join(m.value for m in enum_cls)
    raise InvalidFieldError(f"Invalid {field} {value!r}; expected one of: {allowed}")


def _sql_values(enum_cls: Type[Enum]) -> str:
    return ", ".join(f"'{m.value}'" for m in enum_cls)


# Column length limits (mirrors VARCHAR sizes)
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 15
TITLE_MAX_LENGTH = 100
LOCATION_MAX_LENGTH = 100

# DECIMAL(10,2)
SALARY_MAX = Decimal(10 ** 8)


def require_text(value: Any, field: str, max_length: Optional[int] = None) -> str:
    """Strip a required text field and check it against its column length."""
    if value is None or not str(value).strip():
        raise InvalidFieldError(f"{field} is required")
    text = str(value).strip()
    if max_length is not None and len(text) > max_length:
        raise InvalidFieldError(f"{field} exceeds {max_length} characters")
    return text


def optional_text(value: Any, field: str, max_length: Optional[int] = None) -> Optional[str]:
    """Like ``require_text`` but empty values become ``None``."""
    if value is None or not str(value).strip():
        return None
    return require_text(value, field, max_length)


def normalize_salary(value: Any) -> Optional[float]:
    """Round a salary to two decimal places; ``None`` means not disclosed."""
    if value is None:
        return None
    try:
        amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        raise InvalidFieldError(f"Invalid salary {value!r}")
    if amount.is_nan():
        raise InvalidFieldError(f"Invalid salary {value!r}")
    if amount < 0 or amount >= SALARY_MAX:
        raise InvalidFieldError(f"Salary {value!r} out of range")
    return float(amount)


TRIGGER_NAME = "before_application_insert"
PENDING_LIMIT_MESSAGE = "Candidates cannot have more than {limit} pending applications"


# SQL schema for the recruitment tables
RECRUITMENT_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS employers (
    employer_id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE COLLATE NOCASE,
    phone TEXT NOT NULL,
    company_name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS jobs (
    job_id INTEGER PRIMARY KEY AUTOINCREMENT,
    employer_id INTEGER NOT NULL
        REFERENCES employers(employer_id) ON DELETE CASCADE,
    title TEXT NOT NULL,
    category TEXT NOT NULL CHECK (category IN ({_sql_values(JobCategory)})),
    salary REAL,
    location TEXT,
    job_type TEXT NOT NULL CHECK (job_type IN ({_sql_values(JobType)})),
    posted_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS candidates (
    candidate_id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE COLLATE NOCASE,
    phone TEXT NOT NULL,
    skills TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS applications (
    application_id INTEGER PRIMARY KEY AUTOINCREMENT,
    job_id INTEGER NOT NULL
        REFERENCES jobs(job_id) ON DELETE CASCADE,
    candidate_id INTEGER NOT NULL
        REFERENCES candidates(candidate_id) ON DELETE CASCADE,
    applied_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    status TEXT NOT NULL DEFAULT '{ApplicationStatus.PENDING.value}'
        CHECK (status IN ({_sql_values(ApplicationStatus)}))
);
"""

# Index for faster queries
CREATE_INDEXES = """
CREATE INDEX IF NOT EXISTS idx_jobs_employer ON jobs(employer_id);
CREATE INDEX IF NOT EXISTS idx_jobs_category ON jobs(category);
CREATE INDEX IF NOT EXISTS idx_jobs_salary ON jobs(salary DESC);
CREATE INDEX IF NOT EXISTS idx_applications_job ON applications(job_id);
CREATE INDEX IF NOT EXISTS idx_applications_candidate_status ON applications(candidate_id, status);
"""

# Read-only listing of jobs with the employer's company
CREATE_VIEWS = """
CREATE VIEW IF NOT EXISTS job_listings AS
SELECT j.title, j.salary, e.company_name
FROM jobs j
JOIN employers e ON j.employer_id = e.employer_id;
"""


def pending_limit_trigger(limit: int) -> str:
    """Build the trigger rejecting inserts past the pending-application limit.

    Recreated on every ``init_database`` so a changed limit takes effect.
    """
    message = PENDING_LIMIT_MESSAGE.format(limit=limit).replace("'", "''")
    pending = ApplicationStatus.PENDING.value
    return f"""
DROP TRIGGER IF EXISTS {TRIGGER_NAME};
CREATE TRIGGER {TRIGGER_NAME}
BEFORE INSERT ON applications
FOR EACH ROW
WHEN (
    SELECT COUNT(*) FROM applications
    WHERE candidate_id = NEW.candidate_id AND status = '{pending}'
) >= {int(limit)}
BEGIN
    SELECT RAISE(ABORT, '{message}');
END;
"""
