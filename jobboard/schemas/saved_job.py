"""
Pydantic schemas for saved jobs
"""
from pydantic import BaseModel
from typing import List, Optional

from jobboard.schemas.job import JobBrief


class SavedJobResult(BaseModel):
    message: str
    success: bool = True
    job_id: int
    is_saved: bool


class SavedJobsEnvelope(BaseModel):
    message: str
    success: bool = True
    saved_jobs: List[JobBrief]
    total: Optional[int] = None
