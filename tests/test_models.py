import sqlite3
import unittest

from recruitment.errors import (
    InvalidFieldError,
    PendingLimitExceeded,
    ReferentialIntegrityError,
    DuplicateRecordError,
    translate_integrity_error,
)
from recruitment.models import (
    JobCategory,
    JobType,
    ApplicationStatus,
    coerce_enum,
    normalize_salary,
    pending_limit_trigger,
    require_text,
)


class EnumCoercionTests(unittest.TestCase):

    def test_accepts_members_and_case_insensitive_strings(self):
        self.assertIs(coerce_enum(JobCategory, JobCategory.IT, 'category'), JobCategory.IT)
        self.assertIs(coerce_enum(JobCategory, ' healthcare ', 'category'), JobCategory.HEALTHCARE)
        self.assertIs(coerce_enum(JobType, 'FULL-TIME', 'job_type'), JobType.FULL_TIME)
        self.assertIs(coerce_enum(ApplicationStatus, 'pending', 'status'), ApplicationStatus.PENDING)

    def test_rejects_unknown_and_missing_values(self):
        for value in ('Hospitality', None, 3, ''):
            with self.subTest(value=value):
                with self.assertRaises(InvalidFieldError):
                    coerce_enum(JobCategory, value, 'category')


class FieldNormalizationTests(unittest.TestCase):

    def test_salary_rounding_and_range(self):
        self.assertIsNone(normalize_salary(None))
        self.assertEqual(normalize_salary(80000), 80000.0)
        self.assertEqual(normalize_salary('1234.565'), 1234.57)
        for bad in (-1, 10 ** 8, 'abc', float('nan')):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidFieldError):
                    normalize_salary(bad)

    def test_require_text_strips_and_limits(self):
        self.assertEqual(require_text('  Tech Solutions ', 'company_name', 100), 'Tech Solutions')
        with self.assertRaises(InvalidFieldError):
            require_text('x' * 16, 'phone', 15)
        with self.assertRaises(InvalidFieldError):
            require_text(None, 'name')


class ErrorTranslationTests(unittest.TestCase):

    def test_translates_sqlite_messages(self):
        cases = {
            'FOREIGN KEY constraint failed': ReferentialIntegrityError,
            'Candidates cannot have more than 3 pending applications': PendingLimitExceeded,
            'UNIQUE constraint failed: employers.email': DuplicateRecordError,
            'CHECK constraint failed: category': InvalidFieldError,
        }
        for message, expected in cases.items():
            with self.subTest(message=message):
                self.assertIsInstance(translate_integrity_error(sqlite3.IntegrityError(message)), expected)

    def test_trigger_embeds_limit(self):
        sql = pending_limit_trigger(5)
        self.assertIn('>= 5', sql)
        self.assertIn('cannot have more than 5 pending applications', sql)


if __name__ == "__main__":
    unittest.main()
