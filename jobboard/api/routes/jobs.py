"""
Job API Endpoints
Employers post jobs; everyone can browse them with open position counts
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional, Tuple

from jobboard.api.deps import current_user_id
from jobboard.core.database import get_db
from jobboard.models.job import Job
from jobboard.schemas.job import JobCreate, JobResponse, JobDetailResponse, JobEnvelope, JobListEnvelope
from jobboard.services.job_service import job_service

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def _with_positions(rows: List[Tuple[Job, int]]) -> List[JobResponse]:
    result = []
    for job, available in rows:
        job_response = JobResponse.model_validate(job)
        job_response.available_positions = available
        result.append(job_response)
    return result


# ============== EMPLOYER ENDPOINTS ==============

@router.post("/", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
def post_job(
    job_data: JobCreate,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db)
):
    """Create a job posting under one of the employer's companies"""
    job = job_service.post_job(db, employer_id=user_id, job_data=job_data)
    job_response = JobDetailResponse.model_validate(job)
    job_response.available_positions = job.position
    return JobEnvelope(message="New job created successfully.", job=job_response)


@router.get("/employer/mine", response_model=JobListEnvelope)
def get_my_jobs(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db)
):
    """Jobs posted by the caller"""
    jobs = _with_positions(job_service.list_employer_jobs(db, user_id))
    return JobListEnvelope(message=f"Found {len(jobs)} jobs", jobs=jobs)


@router.get("/employer/all", response_model=JobListEnvelope, dependencies=[Depends(current_user_id)])
def get_all_employers_jobs(db: Session = Depends(get_db)):
    """Jobs from every employer"""
    jobs = _with_positions(job_service.list_all_jobs(db))
    return JobListEnvelope(message=f"Found {len(jobs)} jobs", jobs=jobs)


# ============== PUBLIC ENDPOINTS ==============

@router.get("/", response_model=JobListEnvelope)
def list_jobs(
    keyword: Optional[str] = Query(None, description="Case-insensitive match on title or description"),
    db: Session = Depends(get_db)
):
    """Browse jobs, newest first"""
    jobs = _with_positions(job_service.list_jobs(db, keyword))
    return JobListEnvelope(message=f"Found {len(jobs)} jobs", jobs=jobs)


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Get a specific job by ID"""
    job, available, application_count = job_service.get_job(db, job_id)
    job_response = JobDetailResponse.model_validate(job)
    job_response.available_positions = available
    job_response.application_count = application_count
    return JobEnvelope(message="Job found", job=job_response)
