import unittest

from tests.support import make_session_factory, add_user, add_company, add_job

from fastapi.testclient import TestClient

from jobboard.core.database import get_db
from jobboard.main import app
from jobboard.models.user import UserRole

API = "/api/v1"


class UserEndpointTests(unittest.TestCase):
    def setUp(self):
        self.SessionLocal = make_session_factory()

        with self.SessionLocal() as session:
            employer = add_user(session, "boss@example.com", UserRole.EMPLOYER)
            company = add_company(session, employer)
            self.worker_id = add_user(session, "worker@example.com").id
            self.employer_id = employer.id
            self.job_id = add_job(session, employer, company, title="Backend Developer").id

        def override_get_db():
            with self.SessionLocal() as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)
        self.headers = {"X-User-Id": str(self.worker_id)}

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)

    def test_register(self):
        payload = {"fullname": "Ada", "email": "ada@example.com", "phone_number": "1", "role": "worker"}
        resp = self.client.post(f"{API}/users/", json=payload)
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["user"]["role"], "worker")
        self.assertEqual(resp.json()["message"], "Account created successfully.")

        resp = self.client.post(f"{API}/users/", json=payload)
        self.assertEqual(resp.status_code, 409)

        resp = self.client.post(f"{API}/users/", json=payload | {"email": "x@example.com", "role": "admin"})
        self.assertEqual(resp.status_code, 400)

    def test_profile_update(self):
        resp = self.client.put(
            f"{API}/users/me",
            json={"bio": "Builder", "skills": "python, fastapi,", "resume_url": "https://cdn.example.com/cv.pdf"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200)
        user = resp.json()["user"]
        self.assertEqual(user["skills"], ["python", "fastapi"])
        self.assertEqual(user["bio"], "Builder")
        self.assertEqual(user["email"], "worker@example.com")

        profile = self.client.get(f"{API}/users/me", headers=self.headers).json()["user"]
        self.assertEqual(profile["resume_url"], "https://cdn.example.com/cv.pdf")

    def test_profile_email_must_stay_unique(self):
        resp = self.client.put(f"{API}/users/me", json={"email": "boss@example.com"}, headers=self.headers)
        self.assertEqual(resp.status_code, 409)

    def test_profile_of_unknown_user(self):
        resp = self.client.get(f"{API}/users/me", headers={"X-User-Id": "999"})
        self.assertEqual(resp.status_code, 404)

    def test_save_list_unsave(self):
        url = f"{API}/users/me/saved-jobs/{self.job_id}"

        resp = self.client.post(url, headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {
            "message": "Job saved successfully", "success": True, "job_id": self.job_id, "is_saved": True
        })

        resp = self.client.post(url, headers=self.headers)
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["message"], "Job already saved")

        saved = self.client.get(f"{API}/users/me/saved-jobs", headers=self.headers).json()
        self.assertEqual([j["title"] for j in saved["saved_jobs"]], ["Backend Developer"])
        self.assertEqual(saved["saved_jobs"][0]["company"]["name"], "Acme")

        self.assertEqual(self.client.delete(url, headers=self.headers).status_code, 200)
        resp = self.client.delete(url, headers=self.headers)
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["message"], "Job not saved")

        saved = self.client.get(f"{API}/users/me/saved-jobs", headers=self.headers).json()
        self.assertEqual(saved["saved_jobs"], [])

    def test_toggle(self):
        url = f"{API}/users/me/saved-jobs/{self.job_id}/toggle"

        first = self.client.post(url, headers=self.headers).json()
        self.assertTrue(first["is_saved"])
        self.assertEqual(first["message"], "Job saved successfully")

        second = self.client.post(url, headers=self.headers).json()
        self.assertFalse(second["is_saved"])
        self.assertEqual(second["message"], "Job removed from saved")

        saved = self.client.get(f"{API}/users/me/saved-jobs", headers=self.headers).json()
        self.assertEqual(saved["total"], 0)

    def test_saved_jobs_need_an_account(self):
        resp = self.client.post(
            f"{API}/users/me/saved-jobs/{self.job_id}/toggle", headers={"X-User-Id": "999"}
        )
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "User not found")


class CompanyEndpointTests(unittest.TestCase):
    def setUp(self):
        self.SessionLocal = make_session_factory()
        with self.SessionLocal() as session:
            self.employer_id = add_user(session, "boss@example.com", UserRole.EMPLOYER).id
            self.worker_id = add_user(session, "worker@example.com").id

        def override_get_db():
            with self.SessionLocal() as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)

    def test_register_and_fetch_company(self):
        headers = {"X-User-Id": str(self.employer_id)}
        resp = self.client.post(f"{API}/companies/", json={"name": "Globex"}, headers=headers)
        self.assertEqual(resp.status_code, 201)
        company_id = resp.json()["company"]["id"]

        self.assertEqual(
            self.client.post(f"{API}/companies/", json={"name": "Globex"}, headers=headers).status_code, 409
        )

        listed = self.client.get(f"{API}/companies/", headers=headers).json()["companies"]
        self.assertEqual([c["name"] for c in listed], ["Globex"])

        fetched = self.client.get(f"{API}/companies/{company_id}").json()["company"]
        self.assertEqual(fetched["user_id"], self.employer_id)
        self.assertEqual(self.client.get(f"{API}/companies/999").status_code, 404)

    def test_workers_cannot_register_companies(self):
        resp = self.client.post(
            f"{API}/companies/", json={"name": "Globex"}, headers={"X-User-Id": str(self.worker_id)}
        )
        self.assertEqual(resp.status_code, 403)


class MetaEndpointTests(unittest.TestCase):
    def test_health_and_unknown_route(self):
        client = TestClient(app)
        self.assertEqual(client.get("/health").json()["status"], "healthy")

        resp = client.get("/api/v1/nowhere")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Not Found", "success": False})


if __name__ == "__main__":
    unittest.main()
