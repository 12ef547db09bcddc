"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from jobly.crud import company, job, user, technology

__all__ = ["company", "job", "user", "technology"]
