"""
User model for authentication and job applications.

Users are keyed by username. The admin flag is copied into issued tokens
and checked by admin-gated routes.
"""

from sqlalchemy import Column, String, Text, Boolean
from sqlalchemy.orm import relationship
from jobly.core.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)

    # bcrypt hash, never returned by the API
    password = Column(Text, nullable=False)

    # User profile
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)

    is_admin = Column(Boolean, default=False, nullable=False)

    # Relationships
    applications = relationship("Application", back_populates="user", cascade="all")
    technology_links = relationship("UserTechnology", back_populates="user", cascade="all")

    @property
    def applied_job_ids(self):
        return sorted(application.job_id for application in self.applications)

    @property
    def technology_ids(self):
        return sorted(link.tech_id for link in self.technology_links)

    def __repr__(self):
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"
