"""
Services Layer

Course and student services built on the store layer. The student
service composes the reference validator (write-time gate) and the
enrollment enricher (read-time decoration) around the course lookup client.
"""

from app.services.core.course_service import CourseService
from app.services.core.enrollment_enricher import EnrollmentEnricher
from app.services.core.reference_validator import ReferenceValidator
from app.services.core.student_service import StudentService

__all__ = ["CourseService", "EnrollmentEnricher", "ReferenceValidator", "StudentService"]
