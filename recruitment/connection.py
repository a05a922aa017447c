"""Connection handling and schema setup for the recruitment database."""

import sqlite3
import logging
from pathlib import Path
from typing import Optional
from contextlib import contextmanager
from fasteners import InterProcessLock

from config.settings import DATABASE_PATH, DB_TIMEOUT_SECONDS, PENDING_APPLICATION_LIMIT
from recruitment.errors import (
    RecruitmentError,
    translate_integrity_error,
)
from recruitment.models import (
    RECRUITMENT_SCHEMA,
    CREATE_INDEXES,
    CREATE_VIEWS,
    pending_limit_trigger,
)

# Configure logging with datetime prefix
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def get_lock_path() -> Path:
    """Lock file guarding writers across processes, next to the database."""
    return Path(DATABASE_PATH).with_suffix('.lock')


@contextmanager
def get_db_connection():
    """Context manager for database connections with WAL and locking.

    Every block runs inside a single ``BEGIN IMMEDIATE`` transaction, so the
    write lock is held from the first statement: a count followed by an
    insert cannot interleave with another writer.
    """
    conn = None
    lock = InterProcessLock(str(get_lock_path()))
    lock.acquire()
    try:
        db_path = Path(DATABASE_PATH)
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(db_path), timeout=DB_TIMEOUT_SECONDS, isolation_level=None)
        conn.row_factory = sqlite3.Row
        conn.execute('PRAGMA journal_mode=WAL;')
        conn.execute(f'PRAGMA busy_timeout = {int(DB_TIMEOUT_SECONDS * 1000)};')
        # Must be set outside a transaction; off by default in SQLite
        conn.execute('PRAGMA foreign_keys = ON;')
        conn.execute('BEGIN IMMEDIATE;')

        yield conn
        conn.commit()
    except sqlite3.IntegrityError as e:
        if conn:
            conn.rollback()
        error = translate_integrity_error(e)
        logger.warning(f"Write rejected: {error}")
        raise error from e
    except RecruitmentError as e:
        if conn:
            conn.rollback()
        logger.warning(f"Write rejected: {e}")
        raise
    except Exception as e:
        if conn:
            conn.rollback()
        logger.error(f"Database error: {e}")
        raise
    finally:
        if conn:
            conn.close()
        lock.release()


_pending_limit = PENDING_APPLICATION_LIMIT


def get_pending_limit() -> int:
    """Pending-application limit enforced by the trigger and by writes."""
    return _pending_limit


def init_database(pending_limit: Optional[int] = None):
    """Initialize the database with tables, indexes, the listings view and trigger.

    The limit given here (default ``PENDING_APPLICATION_LIMIT``) is built into
    the trigger and becomes the limit returned by ``get_pending_limit``.
    """
    global _pending_limit
    limit = PENDING_APPLICATION_LIMIT if pending_limit is None else pending_limit
    try:
        with get_db_connection() as conn:
            conn.executescript(RECRUITMENT_SCHEMA)
            conn.executescript(CREATE_INDEXES)
            conn.executescript(CREATE_VIEWS)
            conn.executescript(pending_limit_trigger(limit))
            logger.info(f"Database initialized at {DATABASE_PATH} (pending limit: {limit})")
        _pending_limit = limit
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise
