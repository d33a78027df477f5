from app.api.v1.api import course_router
from app.core.config import settings
from app.main import create_app
from app.models.course import Course

app = create_app(
    title=f"{settings.PROJECT_NAME} Course Service",
    router=course_router,
    tables=[Course.__table__],
)
