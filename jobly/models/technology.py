"""
Technology model and its join tables.

user_technologies and job_technologies carry a UNIQUE constraint on each
(subject, technology) pair. That constraint is the authoritative guard
against duplicate associations; crud code checks first only to return a
friendlier error.
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from jobly.core.database import Base


class Technology(Base):
    __tablename__ = "technologies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, unique=True, nullable=False)

    # Relationships
    job_links = relationship("JobTechnology", back_populates="technology", cascade="all")
    user_links = relationship("UserTechnology", back_populates="technology", cascade="all")

    def __repr__(self):
        return f"<Technology(id={self.id}, name='{self.name}')>"


class JobTechnology(Base):
    __tablename__ = "job_technologies"
    __table_args__ = (
        UniqueConstraint("job_id", "tech_id", name="uq_job_technologies_job_tech"),
    )

    id = Column(Integer, primary_key=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    tech_id = Column(Integer, ForeignKey("technologies.id", ondelete="CASCADE"), nullable=False, index=True)

    job = relationship("Job", back_populates="technology_links")
    technology = relationship("Technology", back_populates="job_links")


class UserTechnology(Base):
    __tablename__ = "user_technologies"
    __table_args__ = (
        UniqueConstraint("user_username", "tech_id", name="uq_user_technologies_user_tech"),
    )

    id = Column(Integer, primary_key=True)
    user_username = Column(String(25), ForeignKey("users.username", ondelete="CASCADE"), nullable=False, index=True)
    tech_id = Column(Integer, ForeignKey("technologies.id", ondelete="CASCADE"), nullable=False, index=True)

    user = relationship("User", back_populates="technology_links")
    technology = relationship("Technology", back_populates="user_links")
