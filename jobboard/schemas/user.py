"""
Pydantic schemas for User API
"""
from pydantic import BaseModel, field_validator
from typing import Optional, List, Union
from datetime import datetime

from jobboard.models.user import UserRole


def split_csv(value):
    """Accept "a, b" or ["a", "b"] and return a clean list"""
    if value is None:
        return value
    if isinstance(value, str):
        value = value.split(",")
    return [str(item).strip() for item in value if str(item).strip()]


class UserCreate(BaseModel):
    fullname: str
    email: str
    phone_number: str
    role: UserRole


class UserUpdate(BaseModel):
    """All fields optional; only the ones sent are changed"""
    fullname: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[Union[str, List[str]]] = None
    location: Optional[str] = None
    resume_url: Optional[str] = None
    resume_original_name: Optional[str] = None
    profile_photo: Optional[str] = None
    company_name: Optional[str] = None

    @field_validator('skills', mode='before')
    @classmethod
    def convert_skills(cls, v):
        return split_csv(v)


class UserSummary(BaseModel):
    id: int
    fullname: str
    email: str

    class Config:
        from_attributes = True


class ApplicantProfile(UserSummary):
    """What an employer sees about someone who applied"""
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    location: Optional[str] = None
    resume_url: Optional[str] = None
    resume_original_name: Optional[str] = None
    profile_photo: Optional[str] = None


class UserResponse(ApplicantProfile):
    role: str
    company_name: Optional[str] = None
    created_at: Optional[datetime] = None


class UserEnvelope(BaseModel):
    message: str
    success: bool = True
    user: UserResponse
