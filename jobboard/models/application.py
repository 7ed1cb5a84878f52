"""
Job application database model
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from jobboard.core.database import Base
import enum


class ApplicationStatus(str, enum.Enum):
    PENDING = "pending"      # Just applied
    ACCEPTED = "accepted"    # Holds one of the job's positions
    REJECTED = "rejected"
    WAITLIST = "waitlist"


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        # One application per worker and job, also under concurrent inserts
        UniqueConstraint("job_id", "applicant_id", name="uq_application_job_applicant"),
    )

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=False, index=True)
    applicant_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=ApplicationStatus.PENDING.value, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    job = relationship("Job", back_populates="applications")
    applicant = relationship("User", back_populates="applications")

    def __repr__(self):
        return f"<Application #{self.id} user #{self.applicant_id} for Job #{self.job_id} ({self.status})>"
