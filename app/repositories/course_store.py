import logging
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.course import Course, is_valid_id

logger = logging.getLogger(__name__)


class CourseStore:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Course]:
        return list(self.db.scalars(select(Course).order_by(Course.id)))

    def find_by_id(self, course_id: int) -> Optional[Course]:
        if not is_valid_id(course_id):
            return None
        return self.db.get(Course, course_id)

    def find_by_ids(self, course_ids: Iterable[int]) -> List[Course]:
        ids = {i for i in course_ids if is_valid_id(i)}
        if not ids:
            return []
        return list(self.db.scalars(select(Course).where(Course.id.in_(ids)).order_by(Course.id)))

    def find_by_title(self, title: str) -> Optional[Course]:
        return self.db.scalars(select(Course).where(Course.title == title)).first()

    def exists_by_id(self, course_id: int) -> bool:
        return self.find_by_id(course_id) is not None

    def save(self, course: Course) -> Course:
        try:
            self.db.add(course)
            self.db.commit()
            self.db.refresh(course)
            return course
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("保存课程失败")
            raise

    def delete(self, course: Course) -> None:
        try:
            self.db.delete(course)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("删除课程失败")
            raise
