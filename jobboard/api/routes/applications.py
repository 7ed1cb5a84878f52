"""
Application API Endpoints
Workers apply and follow their applications; employers review applicants
and move them between statuses
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobboard.api.deps import current_user_id
from jobboard.core.database import get_db
from jobboard.schemas.application import (
    StatusUpdate, ApplicationResponse, AppliedJobResponse, ApplicantResponse,
    EmployerApplicationResponse, StatusChangeResult, ApplyEnvelope,
    AppliedJobsEnvelope, ApplicantsEnvelope, StatusChangeEnvelope,
    EmployerApplicationsEnvelope
)
from jobboard.schemas.job import JobSummary
from jobboard.services.application_service import application_service

router = APIRouter(prefix="/applications", tags=["Applications"])


# ============== WORKER ENDPOINTS ==============

@router.post("/apply/{job_id}", response_model=ApplyEnvelope, status_code=status.HTTP_201_CREATED)
def apply_for_job(
    job_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db)
):
    """Apply to a job; the new application starts as pending"""
    application = application_service.apply(db, applicant_id=user_id, job_id=job_id)
    return ApplyEnvelope(
        message="Job applied successfully.",
        application=ApplicationResponse.model_validate(application)
    )


@router.get("/me", response_model=AppliedJobsEnvelope)
def get_applied_jobs(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db)
):
    """The caller's applications, newest first"""
    applications = application_service.list_for_applicant(db, user_id)
    return AppliedJobsEnvelope(
        message=f"Found {len(applications)} applications",
        applications=[AppliedJobResponse.model_validate(a) for a in applications]
    )


# ============== EMPLOYER ENDPOINTS ==============

@router.get("/employer", response_model=EmployerApplicationsEnvelope)
def get_employer_applications(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db)
):
    """Applications across every job the caller has posted"""
    applications = application_service.list_for_employer(db, user_id)
    return EmployerApplicationsEnvelope(
        message=f"Found {len(applications)} applications",
        total=len(applications),
        applications=[EmployerApplicationResponse.model_validate(a) for a in applications]
    )


@router.get("/job/{job_id}", response_model=ApplicantsEnvelope)
def get_job_applicants(
    job_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db)
):
    """Applicants of one of the caller's jobs"""
    job, applications = application_service.list_applicants(db, employer_id=user_id, job_id=job_id)
    return ApplicantsEnvelope(
        message=f"Found {len(applications)} applicants",
        job=JobSummary.model_validate(job),
        applications=[ApplicantResponse.model_validate(a) for a in applications]
    )


@router.put("/{application_id}/status", response_model=StatusChangeEnvelope)
def update_application_status(
    application_id: int,
    payload: StatusUpdate,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db)
):
    """
    Set an application to pending, accepted, rejected or waitlist.
    Accepting fails with 409 when the job has no open position left.
    """
    application = application_service.update_status(
        db,
        employer_id=user_id,
        application_id=application_id,
        status=payload.status
    )
    return StatusChangeEnvelope(
        message="Status updated successfully.",
        application=StatusChangeResult.model_validate(application)
    )
