import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.course import is_valid_id
from app.models.student import Student

logger = logging.getLogger(__name__)


class StudentStore:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Student]:
        return list(self.db.scalars(select(Student).order_by(Student.id)))

    def find_by_id(self, student_id: int) -> Optional[Student]:
        # 超出范围的ID不可能存在，也避免驱动层整数溢出
        if not is_valid_id(student_id):
            return None
        return self.db.get(Student, student_id)

    def find_by_email(self, email: str) -> Optional[Student]:
        return self.db.scalars(select(Student).where(Student.email == email)).first()

    def exists_by_id(self, student_id: int) -> bool:
        return self.find_by_id(student_id) is not None

    def save(self, student: Student) -> Student:
        """持久化学生及其选课集合，唯一约束冲突以 IntegrityError 抛出"""
        try:
            self.db.add(student)
            self.db.commit()
            self.db.refresh(student)
            return student
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"保存学生违反唯一约束: {student.email}")
            raise
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("保存学生失败")
            raise

    def delete(self, student: Student) -> None:
        try:
            self.db.delete(student)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("删除学生失败")
            raise
