"""Exceptions raised by recruitment database operations."""

import sqlite3


class RecruitmentError(Exception):
    """Base exception for recruitment database errors."""
    pass


class ReferentialIntegrityError(RecruitmentError):
    """Raised when a referenced employer, job or candidate does not exist."""
    pass


class PendingLimitExceeded(RecruitmentError):
    """Raised when a candidate already holds the maximum pending applications."""
    pass


class DuplicateRecordError(RecruitmentError):
    """Raised when a unique column (email) already holds the value."""
    pass


class InvalidFieldError(RecruitmentError, ValueError):
    """Raised when a field is missing or outside its allowed values."""
    pass


def translate_integrity_error(error: sqlite3.IntegrityError) -> RecruitmentError:
    """Map an SQLite integrity failure to the matching recruitment error."""
    message = str(error)
    lowered = message.lower()
    if "foreign key" in lowered:
        return ReferentialIntegrityError(message)
    if "pending applications" in lowered:
        return PendingLimitExceeded(message)
    if "unique" in lowered:
        return DuplicateRecordError(message)
    return InvalidFieldError(message)
