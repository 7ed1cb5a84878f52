"""
Job posting database model
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey, JSON, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from jobboard.core.database import Base


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("position >= 1", name="ck_job_position_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(JSON, default=list)  # List of requirement strings
    salary = Column(Float, nullable=False)
    location = Column(String(200), nullable=False)
    job_type = Column(String(50), nullable=False)  # Full-time, Part-time, Contract
    experience_level = Column(Integer, default=0)  # Years, normalised from free text
    position = Column(Integer, nullable=False)  # Open seats, fixed at creation
    contact_number = Column(String(50))
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    company = relationship("Company", back_populates="jobs")
    employer = relationship("User")
    # Applications are read straight from their table; no id list is cached here
    applications = relationship(
        "Application",
        back_populates="job",
        order_by="[Application.created_at.desc(), Application.id.desc()]"
    )

    def __repr__(self):
        return f"<Job {self.title}>"
