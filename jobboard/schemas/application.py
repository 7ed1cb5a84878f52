"""
Pydantic schemas for Application API
"""
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from jobboard.schemas.job import JobBrief, JobSummary
from jobboard.schemas.user import UserSummary, ApplicantProfile


class StatusUpdate(BaseModel):
    status: Optional[str] = None


class ApplicationResponse(BaseModel):
    id: int
    job_id: int
    applicant_id: int
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AppliedJobResponse(ApplicationResponse):
    """A worker's own application, with the job and its company"""
    job: Optional[JobBrief] = None


class ApplicantResponse(ApplicationResponse):
    """An application as the job's employer sees it"""
    applicant: ApplicantProfile


class EmployerApplicationResponse(ApplicationResponse):
    applicant: ApplicantProfile
    job: JobBrief


class StatusChangeResult(BaseModel):
    id: int
    status: str
    applicant: UserSummary
    job: JobSummary

    class Config:
        from_attributes = True


# ============== ENVELOPES ==============

class ApplyEnvelope(BaseModel):
    message: str
    success: bool = True
    application: ApplicationResponse


class AppliedJobsEnvelope(BaseModel):
    message: str
    success: bool = True
    applications: List[AppliedJobResponse]


class ApplicantsEnvelope(BaseModel):
    message: str
    success: bool = True
    job: JobSummary
    applications: List[ApplicantResponse]


class StatusChangeEnvelope(BaseModel):
    message: str
    success: bool = True
    application: StatusChangeResult


class EmployerApplicationsEnvelope(BaseModel):
    message: str
    success: bool = True
    total: int
    applications: List[EmployerApplicationResponse]
