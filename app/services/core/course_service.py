import logging
from typing import Iterable, List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.infrastructure.result import Err, Ok, Result
from app.models.course import Course
from app.repositories.course_store import CourseStore
from app.schemas.course import CourseRequest, CourseSummary
from app.services.core.mappers import apply_course_request, new_course, to_course_summary
from app.services.errors import DuplicateTitle, NotFound, ServiceError, Unexpected

logger = logging.getLogger(__name__)


class CourseService:
    def __init__(self, store: CourseStore):
        self.store = store

    def _persist(self, course: Course) -> Result[Course, ServiceError]:
        title = course.title
        try:
            return Ok(self.store.save(course))
        except IntegrityError:
            return Err(DuplicateTitle(title=title))
        except SQLAlchemyError as e:
            return Err(Unexpected(reason=str(e)))

    def list_courses(self) -> List[CourseSummary]:
        return [to_course_summary(course) for course in self.store.find_all()]

    def get_course(self, course_id: int) -> Result[CourseSummary, ServiceError]:
        course = self.store.find_by_id(course_id)
        if course is None:
            return Err(NotFound(entity="Course", id=course_id))
        return Ok(to_course_summary(course))

    def lookup_courses(self, course_ids: Iterable[int]) -> List[CourseSummary]:
        """
        按ID集合查询课程

        只返回当前存在的课程，不存在的ID直接忽略，空集合不查库
        """
        return [to_course_summary(course) for course in self.store.find_by_ids(course_ids)]

    def create_course(self, request: CourseRequest) -> Result[CourseSummary, ServiceError]:
        if self.store.find_by_title(request.title) is not None:
            return Err(DuplicateTitle(title=request.title))

        saved = self._persist(new_course(request))
        if isinstance(saved, Err):
            return saved

        logger.info(f"创建课程成功: id={saved.value.id}")
        return Ok(to_course_summary(saved.value))

    def update_course(self, course_id: int, request: CourseRequest) -> Result[CourseSummary, ServiceError]:
        course = self.store.find_by_id(course_id)
        if course is None:
            return Err(NotFound(entity="Course", id=course_id))

        owner = self.store.find_by_title(request.title)
        if owner is not None and owner.id != course.id:
            return Err(DuplicateTitle(title=request.title))

        saved = self._persist(apply_course_request(course, request))
        if isinstance(saved, Err):
            return saved

        logger.info(f"更新课程成功: id={course_id}")
        return Ok(to_course_summary(saved.value))

    def delete_course(self, course_id: int) -> Result[None, ServiceError]:
        """删除课程；引用该课程的学生记录保持不变"""
        course = self.store.find_by_id(course_id)
        if course is None:
            return Err(NotFound(entity="Course", id=course_id))

        try:
            self.store.delete(course)
        except SQLAlchemyError as e:
            return Err(Unexpected(reason=str(e)))

        logger.info(f"删除课程成功: id={course_id}")
        return Ok(None)
