import os

# 测试使用内存SQLite，必须在导入 app 之前设置
os.environ["DATABASE_URI"] = "sqlite://"
os.environ.setdefault("CREATE_TABLES", "true")

from typing import Dict, Iterable, Iterator, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from app.api.dependencies import get_course_client
from app.db.base import Base, build_engine
from app.db.session import get_db
from app.infrastructure.exceptions import CourseServiceError
from app.schemas.course import CourseSummary
import app.models  # noqa: F401  注册全部表


class FakeCourseLookup:
    """内存版课程服务，记录每次调用的ID集合"""

    def __init__(self, courses: Optional[Dict[int, CourseSummary]] = None):
        self.courses = dict(courses or {})
        self.calls: List[set] = []
        self.error: Optional[Exception] = None

    def add(self, course_id: int, title: str, description: str = "A course description.") -> CourseSummary:
        summary = CourseSummary(id=course_id, title=title, description=description)
        self.courses[course_id] = summary
        return summary

    def fail_with(self, error: Exception) -> None:
        self.error = error

    async def resolve(self, course_ids: Iterable[int]) -> List[CourseSummary]:
        requested = set(course_ids)
        self.calls.append(requested)
        if self.error is not None:
            raise self.error
        return [self.courses[i] for i in sorted(requested) if i in self.courses]


@pytest.fixture()
def session_factory() -> Iterator[sessionmaker]:
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(session_factory) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def course_lookup() -> FakeCourseLookup:
    lookup = FakeCourseLookup()
    lookup.add(101, "Databases")
    lookup.add(102, "Distributed Systems")
    return lookup


@pytest.fixture()
def unreachable_lookup() -> FakeCourseLookup:
    lookup = FakeCourseLookup()
    lookup.fail_with(CourseServiceError("无法访问课程服务 http://course-service: connection refused"))
    return lookup


def _override_db(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()
    return _get_db


@pytest.fixture()
def student_api(session_factory, course_lookup) -> Iterator[TestClient]:
    from app.student_main import app

    app.dependency_overrides[get_db] = _override_db(session_factory)
    app.dependency_overrides[get_course_client] = lambda: course_lookup
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def course_api(session_factory) -> Iterator[TestClient]:
    from app.course_main import app

    app.dependency_overrides[get_db] = _override_db(session_factory)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
