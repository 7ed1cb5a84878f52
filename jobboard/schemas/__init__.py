from jobboard.schemas.user import UserCreate, UserUpdate, UserSummary, ApplicantProfile, UserResponse, UserEnvelope
from jobboard.schemas.company import (
    CompanyCreate, CompanySummary, CompanyResponse, CompanyEnvelope, CompanyListEnvelope
)
from jobboard.schemas.job import (
    JobCreate, JobSummary, JobBrief, JobResponse, JobDetailResponse,
    JobEnvelope, JobListEnvelope
)
from jobboard.schemas.application import (
    StatusUpdate, ApplicationResponse, AppliedJobResponse, ApplicantResponse,
    EmployerApplicationResponse, StatusChangeResult, ApplyEnvelope,
    AppliedJobsEnvelope, ApplicantsEnvelope, StatusChangeEnvelope,
    EmployerApplicationsEnvelope
)
from jobboard.schemas.saved_job import SavedJobResult, SavedJobsEnvelope
