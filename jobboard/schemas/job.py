"""
Pydantic schemas for Job API
"""
import re
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Union
from datetime import datetime

from jobboard.schemas.company import CompanySummary
from jobboard.schemas.user import split_csv

# Checked in order; the first phrase found decides the level
EXPERIENCE_KEYWORDS = [
    (("entry", "no experience"), 0),
    (("1-2", "junior"), 1),
    (("3-5", "mid"), 3),
    (("5+", "senior"), 5),
    (("10+", "expert"), 10),
]


def parse_experience_level(value: Union[int, float, str, None]) -> int:
    """Turn "Mid level (3-5 years)" style text into a whole number of years"""
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        return int(value)

    text = value.lower()
    for phrases, level in EXPERIENCE_KEYWORDS:
        if any(phrase in text for phrase in phrases):
            return level

    match = re.search(r"\d+", text)
    return int(match.group()) if match else 0


class JobCreate(BaseModel):
    """Schema for posting a new job"""
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    requirements: List[str]
    salary: float
    location: str = Field(..., min_length=1)
    job_type: str = Field(..., min_length=1)
    experience: int
    position: int = Field(..., ge=1)
    contact_number: str = Field(..., min_length=1)
    company_id: int

    @field_validator('requirements', mode='before')
    @classmethod
    def convert_requirements(cls, v):
        """Comma separated text becomes a list"""
        items = split_csv(v)
        if not items:
            raise ValueError("requirements cannot be empty")
        return items

    @field_validator('experience', mode='before')
    @classmethod
    def convert_experience(cls, v):
        return parse_experience_level(v)


class JobSummary(BaseModel):
    """Job fields echoed back after a status change"""
    id: int
    title: str
    position: int

    class Config:
        from_attributes = True


class JobBrief(JobSummary):
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary: Optional[float] = None
    company: Optional[CompanySummary] = None


class JobResponse(JobBrief):
    description: str
    requirements: List[str] = []
    experience_level: int = 0
    contact_number: Optional[str] = None
    company_id: Optional[int] = None
    created_by: int
    created_at: Optional[datetime] = None
    available_positions: int = 0  # Filled in per request, never stored


class JobDetailResponse(JobResponse):
    application_count: int = 0


class JobEnvelope(BaseModel):
    message: str
    success: bool = True
    job: JobDetailResponse


class JobListEnvelope(BaseModel):
    message: str
    success: bool = True
    jobs: List[JobResponse]
