"""
User API Endpoints
Account registration, profile, and a worker's saved jobs
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobboard.api.deps import current_user_id
from jobboard.core.database import get_db
from jobboard.core.exceptions import AlreadyExists, NotFound
from jobboard.models.user import User
from jobboard.schemas.job import JobBrief
from jobboard.schemas.saved_job import SavedJobResult, SavedJobsEnvelope
from jobboard.schemas.user import UserCreate, UserUpdate, UserResponse, UserEnvelope
from jobboard.services.saved_jobs import saved_jobs_service

router = APIRouter(prefix="/users", tags=["Users"])


def _get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found")
    return user


# ============== ACCOUNT ==============

@router.post("/", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Create an account; credentials are handled by the identity service"""
    if db.query(User).filter(User.email == user_data.email).first():
        raise AlreadyExists("User already exist with this email.")

    user = User(
        fullname=user_data.fullname,
        email=user_data.email,
        phone_number=user_data.phone_number,
        role=user_data.role.value,
        skills=[]
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return UserEnvelope(message="Account created successfully.", user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserEnvelope)
def get_profile(user_id: int = Depends(current_user_id), db: Session = Depends(get_db)):
    user = _get_user(db, user_id)
    return UserEnvelope(message="Profile found", user=UserResponse.model_validate(user))


@router.put("/me", response_model=UserEnvelope)
def update_profile(
    profile: UserUpdate,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db)
):
    """Change only the fields present in the request"""
    user = _get_user(db, user_id)

    update_data = profile.model_dump(exclude_unset=True)
    if update_data.get("email") and update_data["email"] != user.email:
        if db.query(User).filter(User.email == update_data["email"]).first():
            raise AlreadyExists("User already exist with this email.")

    for field, value in update_data.items():
        if value is None:
            continue
        setattr(user, field, value)

    db.commit()
    db.refresh(user)
    return UserEnvelope(message="Profile updated successfully.", user=UserResponse.model_validate(user))


# ============== SAVED JOBS ==============

@router.get("/me/saved-jobs", response_model=SavedJobsEnvelope)
def get_saved_jobs(user_id: int = Depends(current_user_id), db: Session = Depends(get_db)):
    """Bookmarked jobs, most recently saved first"""
    jobs = saved_jobs_service.list_saved(db, user_id)
    return SavedJobsEnvelope(
        message=f"Found {len(jobs)} saved jobs",
        saved_jobs=[JobBrief.model_validate(job) for job in jobs],
        total=len(jobs)
    )


@router.post("/me/saved-jobs/{job_id}", response_model=SavedJobResult)
def save_job(job_id: int, user_id: int = Depends(current_user_id), db: Session = Depends(get_db)):
    saved_jobs_service.save(db, user_id, job_id)
    return SavedJobResult(message="Job saved successfully", job_id=job_id, is_saved=True)


@router.delete("/me/saved-jobs/{job_id}", response_model=SavedJobResult)
def unsave_job(job_id: int, user_id: int = Depends(current_user_id), db: Session = Depends(get_db)):
    saved_jobs_service.unsave(db, user_id, job_id)
    return SavedJobResult(message="Job removed from saved", job_id=job_id, is_saved=False)


@router.post("/me/saved-jobs/{job_id}/toggle", response_model=SavedJobResult)
def toggle_saved_job(job_id: int, user_id: int = Depends(current_user_id), db: Session = Depends(get_db)):
    is_saved = saved_jobs_service.toggle(db, user_id, job_id)
    message = "Job saved successfully" if is_saved else "Job removed from saved"
    return SavedJobResult(message=message, job_id=job_id, is_saved=is_saved)
