"""
Position Accounting
Derives how many seats of a job are still open from its accepted applications.
The figure is computed on every read and never stored on the job.
"""
import logging
from typing import Iterable, List, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.job import Job

logger = logging.getLogger(__name__)


def accepted_count(db: Session, job_id: int) -> int:
    """Number of applications to the job currently holding a position"""
    return db.query(func.count(Application.id)).filter(
        Application.job_id == job_id,
        Application.status == ApplicationStatus.ACCEPTED.value
    ).scalar() or 0


def has_open_position(db: Session, job: Job) -> bool:
    return accepted_count(db, job.id) < job.position


def available_positions(db: Session, job: Job) -> int:
    """
    position - accepted, floored at 0.

    A failing count query must not break a listing, so on database errors the
    job's raw position is returned instead.
    """
    job_id, position = job.id, job.position or 0
    try:
        accepted = accepted_count(db, job_id)
    except SQLAlchemyError:
        logger.warning(
            "Could not count accepted applications for job %s; falling back to position",
            job_id,
            exc_info=True,
        )
        # No rollback: it would expire every job already loaded for the listing
        return max(0, position)
    return max(0, position - accepted)


def annotate_jobs(db: Session, jobs: Iterable[Job]) -> List[Tuple[Job, int]]:
    """Pair every job with its available positions"""
    return [(job, available_positions(db, job)) for job in jobs]
