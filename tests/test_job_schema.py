import unittest

from pydantic import ValidationError

from jobboard.schemas.job import JobCreate, parse_experience_level


class ExperienceLevelTests(unittest.TestCase):
    def test_keywords(self):
        cases = {
            "Entry level": 0,
            "No experience required": 0,
            "Junior": 1,
            "1-2 years": 1,
            "Mid (3-5 years)": 3,
            "Senior": 5,
            "5+ years": 5,
            "Expert": 10,
            "10+ years": 10,
        }
        for text, level in cases.items():
            with self.subTest(text=text):
                self.assertEqual(parse_experience_level(text), level)

    def test_numbers(self):
        self.assertEqual(parse_experience_level("at least 7 years"), 7)
        self.assertEqual(parse_experience_level("whatever"), 0)
        self.assertEqual(parse_experience_level(4), 4)
        self.assertEqual(parse_experience_level(None), 0)


class JobCreateTests(unittest.TestCase):
    base = {
        "title": "Engineer",
        "description": "Build",
        "requirements": ["python"],
        "salary": 1,
        "location": "Remote",
        "job_type": "Contract",
        "experience": 2,
        "position": 1,
        "contact_number": "1",
        "company_id": 1,
    }

    def test_requirements_from_text(self):
        job = JobCreate(**(self.base | {"requirements": " python ,sql,, docker "}))
        self.assertEqual(job.requirements, ["python", "sql", "docker"])

    def test_requirements_cannot_be_empty(self):
        with self.assertRaises(ValidationError):
            JobCreate(**(self.base | {"requirements": " , "}))

    def test_position_must_be_positive(self):
        with self.assertRaises(ValidationError):
            JobCreate(**(self.base | {"position": 0}))


if __name__ == "__main__":
    unittest.main()
