"""
Saved-Jobs Bookmarking Service
A worker's bookmarks are a set of job ids: save, unsave, toggle and list.
"""
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.core.exceptions import AlreadySaved, NotFound, NotSaved
from jobboard.models.job import Job
from jobboard.models.saved_job import SavedJob
from jobboard.models.user import User

logger = logging.getLogger(__name__)


class SavedJobsService:

    def _get_user(self, db: Session, user_id: int) -> User:
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFound("User not found")
        return user

    def _ensure_job(self, db: Session, job_id: int) -> None:
        """
        Refuse to bookmark an unknown job. The foreign key needs a real row,
        and listing only tolerates references left behind by deleted jobs.
        """
        if db.query(Job.id).filter(Job.id == job_id).first() is None:
            raise NotFound("Job not found")

    def is_saved(self, db: Session, user_id: int, job_id: int) -> bool:
        return db.query(SavedJob.id).filter(
            SavedJob.user_id == user_id,
            SavedJob.job_id == job_id
        ).first() is not None

    def _insert(self, db: Session, user_id: int, job_id: int) -> None:
        db.add(SavedJob(user_id=user_id, job_id=job_id))
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise AlreadySaved()

    def _remove(self, db: Session, user_id: int, job_id: int) -> None:
        # Every row for the pair goes, whatever order they were saved in
        db.query(SavedJob).filter(
            SavedJob.user_id == user_id,
            SavedJob.job_id == job_id
        ).delete(synchronize_session=False)
        db.commit()

    def save(self, db: Session, user_id: int, job_id: int) -> None:
        self._get_user(db, user_id)
        if self.is_saved(db, user_id, job_id):
            raise AlreadySaved()
        self._ensure_job(db, job_id)
        self._insert(db, user_id, job_id)
        logger.info("User %s saved job %s", user_id, job_id)

    def unsave(self, db: Session, user_id: int, job_id: int) -> None:
        self._get_user(db, user_id)
        if not self.is_saved(db, user_id, job_id):
            raise NotSaved()
        self._remove(db, user_id, job_id)
        logger.info("User %s removed saved job %s", user_id, job_id)

    def toggle(self, db: Session, user_id: int, job_id: int) -> bool:
        """Flip membership and return whether the job is saved afterwards"""
        self._get_user(db, user_id)
        if self.is_saved(db, user_id, job_id):
            self._remove(db, user_id, job_id)
            return False

        self._ensure_job(db, job_id)
        self._insert(db, user_id, job_id)
        return True

    def list_saved(self, db: Session, user_id: int) -> List[Job]:
        """
        Saved jobs, most recently saved first. Bookmarks whose job has since
        been deleted are left out.
        """
        self._get_user(db, user_id)
        job_ids = [
            row.job_id for row in db.query(SavedJob.job_id).filter(
                SavedJob.user_id == user_id
            ).order_by(SavedJob.saved_at.desc(), SavedJob.id.desc()).all()
        ]
        if not job_ids:
            return []

        jobs = db.query(Job).options(joinedload(Job.company)).filter(Job.id.in_(job_ids)).all()
        by_id = {job.id: job for job in jobs}
        return [by_id[job_id] for job_id in job_ids if job_id in by_id]


# Singleton instance
saved_jobs_service = SavedJobsService()
