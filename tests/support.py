import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from datetime import datetime

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.core.database import init_db
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.user import User, UserRole


def make_session_factory():
    engine = create_engine(
        "sqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    return sessionmaker(bind=engine, autoflush=False)


def add_user(session, email, role=UserRole.WORKER, fullname=None):
    user = User(
        fullname=fullname or email.split("@")[0].title(),
        email=email,
        phone_number="5550100",
        role=role.value,
        skills=["python"],
    )
    session.add(user)
    session.commit()
    return user


def add_company(session, owner, name="Acme"):
    company = Company(name=name, location="Remote", user_id=owner.id)
    session.add(company)
    session.commit()
    return company


def add_job(session, employer, company=None, position=1, title="Backend Developer",
            description="Build APIs", created_at=None):
    job = Job(
        title=title,
        description=description,
        requirements=["python", "sql"],
        salary=90000,
        location="Remote",
        job_type="Full-time",
        experience_level=1,
        position=position,
        contact_number="5550100",
        company_id=company.id if company else None,
        created_by=employer.id,
        created_at=created_at or datetime.utcnow(),
    )
    session.add(job)
    session.commit()
    return job


def add_application(session, job, applicant, status=ApplicationStatus.PENDING, created_at=None):
    application = Application(
        job_id=job.id,
        applicant_id=applicant.id,
        status=status.value,
        created_at=created_at or datetime.utcnow(),
    )
    session.add(application)
    session.commit()
    return application


def accepted_ids(session, job_id):
    return sorted(
        row.id for row in session.query(Application.id).filter(
            Application.job_id == job_id,
            Application.status == ApplicationStatus.ACCEPTED.value,
        )
    )
