"""
User account database model
Workers apply to and bookmark jobs, employers post them
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from jobboard.core.database import Base
import enum


class UserRole(str, enum.Enum):
    WORKER = "worker"
    EMPLOYER = "employer"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    fullname = Column(String(200), nullable=False)
    email = Column(String(200), nullable=False, unique=True, index=True)
    phone_number = Column(String(50))
    role = Column(String(20), nullable=False, default=UserRole.WORKER.value)

    # Profile
    bio = Column(Text)
    skills = Column(JSON, default=list)
    location = Column(String(200))
    resume_url = Column(Text)  # URL produced by the upload service
    resume_original_name = Column(String(300))
    profile_photo = Column(Text)
    company_name = Column(String(200))  # Employer profiles only

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    applications = relationship("Application", back_populates="applicant")
    saved_jobs = relationship(
        "SavedJob",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="[SavedJob.saved_at.desc(), SavedJob.id.desc()]"
    )

    @property
    def is_employer(self) -> bool:
        return self.role == UserRole.EMPLOYER.value

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"
