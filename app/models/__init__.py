from app.models.course import Course
from app.models.student import Student, StudentCourseEnrollment

__all__ = ["Course", "Student", "StudentCourseEnrollment"]
