from app.api.v1.api import student_router
from app.core.config import settings
from app.main import create_app
from app.models.student import Student, StudentCourseEnrollment

app = create_app(
    title=f"{settings.PROJECT_NAME} Student Service",
    router=student_router,
    tables=[Student.__table__, StudentCourseEnrollment.__table__],
)
