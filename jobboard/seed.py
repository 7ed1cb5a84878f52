"""
Load sample companies and jobs into the configured database.

    python -m jobboard.seed
"""
import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from jobboard.core.database import SessionLocal, init_db
from jobboard.core.logging import configure_logging
from jobboard.models.application import Application
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.saved_job import SavedJob
from jobboard.models.user import User, UserRole

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYER_EMAIL = "employer@example.com"

SAMPLE_COMPANIES = [
    {"name": "TechCorp Solutions", "description": "Leading technology solutions provider",
     "website": "https://techcorp.com", "location": "San Francisco, CA"},
    {"name": "InnovateSoft", "description": "Innovative software development company",
     "website": "https://innovatesoft.com", "location": "New York, NY"},
    {"name": "DataFlow Systems", "description": "Data analytics and AI solutions",
     "website": "https://dataflow.com", "location": "Austin, TX"},
    {"name": "CloudTech Industries", "description": "Cloud infrastructure services",
     "website": "https://cloudtech.com", "location": "Seattle, WA"},
    {"name": "WebSolutions Pro", "description": "Full-stack web development agency",
     "website": "https://websolutions.com", "location": "Los Angeles, CA"},
]

SAMPLE_TITLES = [
    "Full Stack Developer",
    "Frontend Developer",
    "Backend Developer",
    "Data Scientist",
    "DevOps Engineer",
]

JOB_TYPES = ["Full-time", "Part-time", "Contract"]


def _sample_employer(db: Session) -> User:
    employer = db.query(User).filter(User.email == SAMPLE_EMPLOYER_EMAIL).first()
    if employer is None:
        employer = User(
            fullname="Sample Employer",
            email=SAMPLE_EMPLOYER_EMAIL,
            phone_number="0000000000",
            role=UserRole.EMPLOYER.value,
            skills=[]
        )
        db.add(employer)
        db.flush()
    return employer


def seed_sample_data(db: Session) -> Tuple[List[Company], List[Job]]:
    """Replace every company, job and application with the sample set"""
    # Children first so foreign keys hold
    db.query(SavedJob).delete(synchronize_session=False)
    db.query(Application).delete(synchronize_session=False)
    db.query(Job).delete(synchronize_session=False)
    db.query(Company).delete(synchronize_session=False)

    employer = _sample_employer(db)

    companies = [Company(user_id=employer.id, **data) for data in SAMPLE_COMPANIES]
    db.add_all(companies)
    db.flush()

    jobs = []
    for index, title in enumerate(SAMPLE_TITLES):
        company = companies[index % len(companies)]
        jobs.append(Job(
            title=title,
            description=f"{company.name} is hiring a {title}.",
            requirements=["Communication", "Teamwork", title.split()[0]],
            salary=60000 + index * 10000,
            location=company.location,
            job_type=JOB_TYPES[index % len(JOB_TYPES)],
            experience_level=index,
            position=index % 3 + 1,
            contact_number="0000000000",
            company_id=company.id,
            created_by=employer.id,
        ))
    db.add_all(jobs)
    db.commit()

    logger.info("Created %s companies and %s jobs", len(companies), len(jobs))
    return companies, jobs


def main() -> None:
    configure_logging()
    init_db()
    db = SessionLocal()
    try:
        seed_sample_data(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
