import unittest

from tests.support import make_session_factory, add_user, add_job, add_application

from jobboard.models.application import Application
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.user import User, UserRole
from jobboard.seed import SAMPLE_COMPANIES, SAMPLE_TITLES, seed_sample_data


class SeedSampleDataTests(unittest.TestCase):
    def setUp(self):
        self.session = make_session_factory()()

    def tearDown(self):
        self.session.close()

    def test_seed_replaces_existing_jobs(self):
        employer = add_user(self.session, "old@example.com", UserRole.EMPLOYER)
        worker = add_user(self.session, "worker@example.com")
        stale = add_job(self.session, employer, title="Stale")
        add_application(self.session, stale, worker)

        companies, jobs = seed_sample_data(self.session)

        self.assertEqual(len(companies), len(SAMPLE_COMPANIES))
        self.assertEqual(sorted(j.title for j in self.session.query(Job)), sorted(SAMPLE_TITLES))
        self.assertEqual(self.session.query(Application).count(), 0)
        self.assertTrue(all(job.position >= 1 for job in jobs))

    def test_seed_is_repeatable(self):
        seed_sample_data(self.session)
        seed_sample_data(self.session)

        self.assertEqual(self.session.query(Company).count(), len(SAMPLE_COMPANIES))
        self.assertEqual(self.session.query(Job).count(), len(SAMPLE_TITLES))
        self.assertEqual(self.session.query(User).filter_by(role="employer").count(), 1)


if __name__ == "__main__":
    unittest.main()
