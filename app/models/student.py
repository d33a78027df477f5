from typing import Iterable, Set

from sqlalchemy import Column, BigInteger, ForeignKey, VARCHAR
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.models.course import ID_TYPE


class StudentCourseEnrollment(Base):
    """学生选课关系，(student_id, course_id) 联合主键保证集合语义"""
    __tablename__ = "student_course_enrollments"

    student_id = Column(ID_TYPE, ForeignKey("students.id", ondelete="CASCADE"), primary_key=True)
    # 课程归课程服务所有，这里只保存标识，不建外键
    course_id = Column(BigInteger, primary_key=True, autoincrement=False)


class Student(Base):
    """
    学生数据库模型

    保存学生身份信息和已选课程ID集合
    """
    __tablename__ = "students"

    id = Column(ID_TYPE, primary_key=True, autoincrement=True)
    first_name = Column(VARCHAR(50), nullable=False)
    last_name = Column(VARCHAR(50), nullable=False)
    email = Column(VARCHAR(100), nullable=False, unique=True, index=True)

    enrollments = relationship(
        StudentCourseEnrollment,
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def course_ids(self) -> Set[int]:
        return {enrollment.course_id for enrollment in self.enrollments}

    def set_course_ids(self, course_ids: Iterable[int]) -> None:
        """
        用给定集合替换已选课程

        保留仍在新集合中的关系行，只增删差异部分，避免同主键先删后插
        """
        wanted = set(course_ids or ())
        self.enrollments = [e for e in self.enrollments if e.course_id in wanted]
        for course_id in sorted(wanted - self.course_ids):
            self.enrollments.append(StudentCourseEnrollment(course_id=course_id))

    def __repr__(self) -> str:
        return f"<Student id={self.id} email={self.email!r}>"
