"""
Job Posting Service
Employers post jobs; listings carry the derived available positions.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from jobboard.core.exceptions import Forbidden, NotFound
from jobboard.models.application import Application
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.user import User
from jobboard.schemas.job import JobCreate
from jobboard.services import position_accounting

logger = logging.getLogger(__name__)


class JobService:

    def post_job(self, db: Session, employer_id: int, job_data: JobCreate) -> Job:
        employer = db.query(User).filter(User.id == employer_id).first()
        if not employer:
            raise NotFound("User not found")
        if not employer.is_employer:
            raise Forbidden("Only employers can post jobs")

        company = db.query(Company).filter(Company.id == job_data.company_id).first()
        if not company:
            raise NotFound("Company not found")

        data = job_data.model_dump()
        data["experience_level"] = data.pop("experience")
        job = Job(**data, created_by=employer_id)
        db.add(job)
        db.commit()
        db.refresh(job)

        logger.info("Employer %s posted job %s (%s seats)", employer_id, job.id, job.position)
        return job

    def _listing_query(self, db: Session):
        return db.query(Job).options(joinedload(Job.company)).order_by(
            Job.created_at.desc(), Job.id.desc()
        )

    def list_jobs(self, db: Session, keyword: Optional[str] = None) -> List[Tuple[Job, int]]:
        """Public listing, optionally matching the keyword in title or description"""
        query = self._listing_query(db)
        if keyword:
            like = f"%{keyword}%"
            query = query.filter(or_(Job.title.ilike(like), Job.description.ilike(like)))
        return position_accounting.annotate_jobs(db, query.all())

    def list_employer_jobs(self, db: Session, employer_id: int) -> List[Tuple[Job, int]]:
        query = self._listing_query(db).filter(Job.created_by == employer_id)
        return position_accounting.annotate_jobs(db, query.all())

    def list_all_jobs(self, db: Session) -> List[Tuple[Job, int]]:
        return position_accounting.annotate_jobs(db, self._listing_query(db).all())

    def get_job(self, db: Session, job_id: int) -> Tuple[Job, int, int]:
        """Job with its available positions and application count"""
        job = db.query(Job).options(joinedload(Job.company)).filter(Job.id == job_id).first()
        if not job:
            raise NotFound("Job not found.")

        application_count = db.query(func.count(Application.id)).filter(
            Application.job_id == job.id
        ).scalar()
        return job, position_accounting.available_positions(db, job), application_count


# Singleton instance
job_service = JobService()
