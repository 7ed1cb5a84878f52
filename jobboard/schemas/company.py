"""
Pydantic schemas for Company API
"""
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class CompanyCreate(BaseModel):
    name: str
    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    logo: Optional[str] = None


class CompanySummary(BaseModel):
    id: int
    name: str
    logo: Optional[str] = None

    class Config:
        from_attributes = True


class CompanyResponse(CompanySummary):
    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None


class CompanyEnvelope(BaseModel):
    message: str
    success: bool = True
    company: CompanyResponse


class CompanyListEnvelope(BaseModel):
    message: str
    success: bool = True
    companies: List[CompanyResponse]
