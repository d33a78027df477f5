"""
API Dependencies

Provides dependency injection for services and database sessions.
The course lookup client is a separate dependency so tests and
deployments can swap the collaborator without touching the services.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.infrastructure.external_apis import CourseLookupClient
from app.repositories import CourseStore, StudentStore
from app.services import CourseService, EnrollmentEnricher, ReferenceValidator, StudentService


@lru_cache
def get_course_client() -> CourseLookupClient:
    """
    Get the course lookup client

    The client holds no per-request state, so one instance is shared.
    """
    return CourseLookupClient()


def get_course_service(db: Session = Depends(get_db)) -> CourseService:
    """
    Get Course Service instance with database session

    Returns:
        CourseService: Configured course service
    """
    return CourseService(store=CourseStore(db))


def get_student_service(
    db: Session = Depends(get_db),
    course_client: CourseLookupClient = Depends(get_course_client),
) -> StudentService:
    """
    Get Student Service instance with database session and course collaborator

    Returns:
        StudentService: Configured student service
    """
    return StudentService(
        store=StudentStore(db),
        validator=ReferenceValidator(course_client, service_name=settings.COURSE_SERVICE_NAME),
        enricher=EnrollmentEnricher(course_client),
    )
