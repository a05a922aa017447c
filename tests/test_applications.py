import sqlite3
import threading
import unittest
from unittest import mock

from recruitment import (
    add_employer,
    add_job,
    add_candidate,
    add_application,
    get_application,
    get_applications,
    count_pending_applications,
    update_application_status,
    delete_application,
    init_database,
    get_pending_limit,
    ApplicationStatus,
    PendingLimitExceeded,
)
from tests.db_test_case import DatabaseTestCase


class PendingLimitTests(DatabaseTestCase):

    def setUp(self):
        super().setUp()
        employer_id = add_employer('John Doe', 'john@company.com', '9876543210', 'Tech Solutions')
        self.job_ids = [
            add_job(employer_id, f'Job {i}', 'IT', 'Full-time', 50000 + i * 1000)
            for i in range(6)
        ]
        self.candidate_id = add_candidate('Mike Johnson', 'mike@gmail.com', '7654321098', 'Python')

    def test_new_application_defaults_to_pending(self):
        application_id = add_application(self.job_ids[0], self.candidate_id)
        application = get_application(application_id)
        self.assertEqual(application['status'], 'Pending')
        self.assertIsNotNone(application['applied_date'])

    def test_third_pending_succeeds_and_fourth_is_rejected(self):
        for job_id in self.job_ids[:3]:
            add_application(job_id, self.candidate_id)
        self.assertEqual(count_pending_applications(self.candidate_id), 3)

        with self.assertRaises(PendingLimitExceeded) as ctx:
            add_application(self.job_ids[3], self.candidate_id)

        self.assertIn("cannot have more than 3 pending applications", str(ctx.exception))
        self.assertEqual(len(get_applications(candidate_id=self.candidate_id)), 3)

    def test_limit_applies_to_any_new_application(self):
        for job_id in self.job_ids[:3]:
            add_application(job_id, self.candidate_id)
        with self.assertRaises(PendingLimitExceeded):
            add_application(self.job_ids[3], self.candidate_id, ApplicationStatus.ACCEPTED)

    def test_decided_applications_do_not_count(self):
        add_application(self.job_ids[0], self.candidate_id, 'Accepted')
        add_application(self.job_ids[1], self.candidate_id, 'Rejected')
        for job_id in self.job_ids[2:5]:
            add_application(job_id, self.candidate_id)
        self.assertEqual(count_pending_applications(self.candidate_id), 3)
        self.assertEqual(len(get_applications(candidate_id=self.candidate_id)), 5)

    def test_limit_is_per_candidate(self):
        other = add_candidate('Emma Brown', 'emma@gmail.com', '6543210987', 'Excel')
        for job_id in self.job_ids[:3]:
            add_application(job_id, self.candidate_id)
        add_application(self.job_ids[0], other)
        self.assertEqual(count_pending_applications(other), 1)

    def test_resolving_a_pending_application_frees_a_slot(self):
        ids = [add_application(job_id, self.candidate_id) for job_id in self.job_ids[:3]]
        self.assertTrue(update_application_status(ids[0], ApplicationStatus.REJECTED))
        add_application(self.job_ids[3], self.candidate_id)
        self.assertEqual(count_pending_applications(self.candidate_id), 3)

    def test_reopening_to_pending_respects_limit(self):
        accepted = add_application(self.job_ids[0], self.candidate_id, 'Accepted')
        for job_id in self.job_ids[1:4]:
            add_application(job_id, self.candidate_id)

        with self.assertRaises(PendingLimitExceeded):
            update_application_status(accepted, 'pending')
        self.assertEqual(get_application(accepted)['status'], 'Accepted')

    def test_update_missing_application_returns_false(self):
        self.assertFalse(update_application_status(9999, 'Accepted'))

    def test_delete_application(self):
        application_id = add_application(self.job_ids[0], self.candidate_id)
        self.assertTrue(delete_application(application_id))
        self.assertIsNone(get_application(application_id))
        self.assertFalse(delete_application(application_id))

    def test_trigger_rejects_raw_inserts_past_limit(self):
        for job_id in self.job_ids[:3]:
            add_application(job_id, self.candidate_id)

        conn = sqlite3.connect(self.db_path)
        self.addCleanup(conn.close)
        with self.assertRaises(sqlite3.IntegrityError) as ctx:
            conn.execute(
                "INSERT INTO applications (job_id, candidate_id) VALUES (?, ?)",
                (self.job_ids[3], self.candidate_id),
            )
        self.assertIn("pending applications", str(ctx.exception))

    def test_trigger_error_is_translated(self):
        for job_id in self.job_ids[:3]:
            add_application(job_id, self.candidate_id)
        # Bypass the Python-side count so only the trigger can reject the row
        with mock.patch("recruitment.applications.get_pending_limit", return_value=100):
            with self.assertRaises(PendingLimitExceeded):
                add_application(self.job_ids[3], self.candidate_id)
        self.assertEqual(count_pending_applications(self.candidate_id), 3)

    def test_configured_lower_limit(self):
        init_database(pending_limit=2)
        self.assertEqual(get_pending_limit(), 2)
        add_application(self.job_ids[0], self.candidate_id)
        add_application(self.job_ids[1], self.candidate_id)
        with self.assertRaises(PendingLimitExceeded) as ctx:
            add_application(self.job_ids[2], self.candidate_id)
        self.assertIn("more than 2 pending", str(ctx.exception))

    def test_configured_higher_limit(self):
        init_database(pending_limit=5)
        for job_id in self.job_ids[:5]:
            add_application(job_id, self.candidate_id)
        self.assertEqual(count_pending_applications(self.candidate_id), 5)
        with self.assertRaises(PendingLimitExceeded) as ctx:
            add_application(self.job_ids[5], self.candidate_id)
        self.assertIn("more than 5 pending", str(ctx.exception))

    def test_reopening_to_pending_uses_configured_limit(self):
        init_database(pending_limit=4)
        accepted = add_application(self.job_ids[0], self.candidate_id, 'Accepted')
        for job_id in self.job_ids[1:4]:
            add_application(job_id, self.candidate_id)
        self.assertTrue(update_application_status(accepted, 'Pending'))
        self.assertEqual(count_pending_applications(self.candidate_id), 4)

    def test_status_filter_ignores_case(self):
        add_application(self.job_ids[0], self.candidate_id, 'Accepted')
        add_application(self.job_ids[1], self.candidate_id)
        add_application(self.job_ids[2], self.candidate_id, 'Rejected')
        accepted = get_applications(status='accepted')
        self.assertEqual([a['job_id'] for a in accepted], [self.job_ids[0]])
        pending = get_applications(candidate_id=self.candidate_id, status=ApplicationStatus.PENDING)
        self.assertEqual([a['job_id'] for a in pending], [self.job_ids[1]])

    def test_concurrent_inserts_never_exceed_limit(self):
        results = []
        results_lock = threading.Lock()
        start = threading.Barrier(len(self.job_ids))

        def apply(job_id):
            start.wait()
            try:
                add_application(job_id, self.candidate_id)
                outcome = 'ok'
            except PendingLimitExceeded:
                outcome = 'rejected'
            with results_lock:
                results.append(outcome)

        threads = [threading.Thread(target=apply, args=(job_id,)) for job_id in self.job_ids]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=60)

        self.assertEqual(results.count('ok'), 3)
        self.assertEqual(results.count('rejected'), len(self.job_ids) - 3)
        self.assertEqual(count_pending_applications(self.candidate_id), 3)


if __name__ == "__main__":
    unittest.main()
