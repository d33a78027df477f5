"""
Store layer.

Each store wraps a SQLAlchemy session and owns the queries for a single
table family. Mutating calls commit immediately; on failure they roll
back and re-raise so the service layer can translate the error.
"""

from app.repositories.course_store import CourseStore
from app.repositories.student_store import StudentStore

__all__ = ["CourseStore", "StudentStore"]
