"""
Application Lifecycle Service
Workers apply to jobs; the employer who posted a job moves its applications
between pending, accepted, rejected and waitlist. Accepting is the only guarded
transition: it needs an open position at the moment it is written.
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, aliased, joinedload

from jobboard.core.exceptions import (
    CapacityExceeded, DuplicateApplication, Forbidden, InvalidStatus,
    NotFound, ValidationError
)
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.job import Job
from jobboard.models.user import User
from jobboard.services import position_accounting

logger = logging.getLogger(__name__)

VALID_STATUSES = [s.value for s in ApplicationStatus]


def normalize_status(status: Optional[str]) -> str:
    """Lower-case and validate a requested status"""
    if not status or not status.strip():
        raise ValidationError("Status is required")
    value = status.strip().lower()
    if value not in VALID_STATUSES:
        raise InvalidStatus(f"Invalid status. Must be one of: {', '.join(VALID_STATUSES)}")
    return value


class ApplicationService:
    """
    Apply, change status and the read-only application listings
    """

    def apply(self, db: Session, applicant_id: int, job_id: int) -> Application:
        """
        Create a pending application of the worker to the job.

        Capacity is judged on accepted applications only, so any number of
        pending applications may pile up; the cap bites when accepting.
        """
        job = db.query(Job).filter(Job.id == job_id).first()
        if not job:
            raise NotFound("Job not found")

        applicant = db.query(User).filter(User.id == applicant_id).first()
        if not applicant:
            raise NotFound("User not found")
        if applicant.is_employer:
            raise Forbidden("Only workers can apply for jobs")

        if not position_accounting.has_open_position(db, job):
            logger.info("Rejected application of user %s to full job %s", applicant_id, job_id)
            raise CapacityExceeded()

        existing = db.query(Application).filter(
            Application.job_id == job_id,
            Application.applicant_id == applicant_id
        ).first()
        if existing:
            raise DuplicateApplication()

        application = Application(
            job_id=job.id,
            applicant_id=applicant_id,
            status=ApplicationStatus.PENDING.value
        )
        db.add(application)

        # Single commit; a racing duplicate is stopped by the unique constraint
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateApplication()

        db.refresh(application)
        logger.info("User %s applied to job %s (application %s)", applicant_id, job_id, application.id)
        return application

    def update_status(
        self,
        db: Session,
        employer_id: int,
        application_id: int,
        status: Optional[str]
    ) -> Application:
        """Move an application to a new status on behalf of the job's owner"""
        new_status = normalize_status(status)

        application = db.query(Application).options(
            joinedload(Application.job),
            joinedload(Application.applicant)
        ).filter(Application.id == application_id).first()
        if not application:
            raise NotFound("Application not found.")

        job = application.job
        if job.created_by != employer_id:
            raise Forbidden("Only the employer who posted this job can update its applications")

        previous_status = application.status
        if new_status == ApplicationStatus.ACCEPTED.value and previous_status != ApplicationStatus.ACCEPTED.value:
            self._accept_if_open(db, application, job)
        else:
            application.status = new_status
            db.commit()

        db.refresh(application)
        logger.info(
            "Application %s for job %s moved %s -> %s",
            application.id, job.id, previous_status, application.status
        )
        return application

    def _accept_if_open(self, db: Session, application: Application, job: Job) -> None:
        """
        Accept in one conditional UPDATE so two employers' clicks cannot both
        take the last seat between a read and a write.
        """
        holders = aliased(Application)
        accepted_now = (
            select(func.count(holders.id))
            .where(
                holders.job_id == job.id,
                holders.status == ApplicationStatus.ACCEPTED.value
            )
            .scalar_subquery()
        )
        result = db.execute(
            update(Application)
            .where(Application.id == application.id, accepted_now < job.position)
            .values(status=ApplicationStatus.ACCEPTED.value, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            db.rollback()
            logger.info("Job %s is full; application %s stays %s", job.id, application.id, application.status)
            raise CapacityExceeded()
        db.commit()

    # ============== QUERIES ==============

    def list_for_applicant(self, db: Session, applicant_id: int) -> List[Application]:
        """A worker's applications, newest first, with job and company"""
        return db.query(Application).options(
            joinedload(Application.job).joinedload(Job.company)
        ).filter(
            Application.applicant_id == applicant_id
        ).order_by(Application.created_at.desc(), Application.id.desc()).all()

    def list_applicants(self, db: Session, employer_id: int, job_id: int) -> Tuple[Job, List[Application]]:
        """Everyone who applied to one of the employer's jobs, newest first"""
        job = db.query(Job).filter(Job.id == job_id).first()
        if not job:
            raise NotFound("Job not found.")
        if job.created_by != employer_id:
            raise Forbidden("Only the employer who posted this job can view its applicants")

        applications = db.query(Application).options(
            joinedload(Application.applicant)
        ).filter(
            Application.job_id == job_id
        ).order_by(Application.created_at.desc(), Application.id.desc()).all()
        return job, applications

    def list_for_employer(self, db: Session, employer_id: int) -> List[Application]:
        """Applications across every job the employer has posted"""
        employer_jobs = select(Job.id).where(Job.created_by == employer_id)
        return db.query(Application).options(
            joinedload(Application.applicant),
            joinedload(Application.job).joinedload(Job.company)
        ).filter(
            Application.job_id.in_(employer_jobs)
        ).order_by(Application.created_at.desc(), Application.id.desc()).all()


# Singleton instance
application_service = ApplicationService()
