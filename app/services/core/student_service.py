import asyncio
import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.infrastructure.result import Err, Ok, Result
from app.models.student import Student
from app.repositories.student_store import StudentStore
from app.schemas.student import StudentRequest, StudentView
from app.services.core.enrollment_enricher import EnrollmentEnricher
from app.services.core.mappers import apply_student_request, new_student, to_student_view
from app.services.core.reference_validator import ReferenceValidator
from app.services.errors import DuplicateEmail, NotFound, ServiceError, Unexpected

logger = logging.getLogger(__name__)


class StudentService:
    """
    学生记录编排

    写入前通过 ReferenceValidator 校验课程引用（失败即拒绝），
    返回前通过 EnrollmentEnricher 补全课程详情（失败只降级）。
    每个写操作在全部校验之后只调用一次存储的写方法。
    """

    def __init__(self, store: StudentStore, validator: ReferenceValidator, enricher: EnrollmentEnricher):
        self.store = store
        self.validator = validator
        self.enricher = enricher

    async def _view(self, student: Student) -> StudentView:
        courses = await self.enricher.enrich(student.course_ids)
        return to_student_view(student, courses)

    def _persist(self, student: Student) -> Result[Student, ServiceError]:
        email = student.email
        try:
            return Ok(self.store.save(student))
        except IntegrityError:
            # 并发请求可能同时通过邮箱预检查，以数据库唯一约束为准
            return Err(DuplicateEmail(email=email))
        except SQLAlchemyError as e:
            return Err(Unexpected(reason=str(e)))

    async def list_students(self) -> List[StudentView]:
        students = self.store.find_all()
        return list(await asyncio.gather(*(self._view(student) for student in students)))

    async def get_student(self, student_id: int) -> Result[StudentView, ServiceError]:
        student = self.store.find_by_id(student_id)
        if student is None:
            return Err(NotFound(entity="Student", id=student_id))
        return Ok(await self._view(student))

    async def create_student(self, request: StudentRequest) -> Result[StudentView, ServiceError]:
        if self.store.find_by_email(request.email) is not None:
            return Err(DuplicateEmail(email=request.email))

        validation = await self.validator.validate(request.requested_course_ids)
        if isinstance(validation, Err):
            return validation

        saved = self._persist(new_student(request))
        if isinstance(saved, Err):
            return saved

        logger.info(f"创建学生成功: id={saved.value.id}")
        return Ok(await self._view(saved.value))

    async def update_student(self, student_id: int, request: StudentRequest) -> Result[StudentView, ServiceError]:
        student = self.store.find_by_id(student_id)
        if student is None:
            return Err(NotFound(entity="Student", id=student_id))

        if student.email != request.email:
            owner = self.store.find_by_email(request.email)
            if owner is not None and owner.id != student.id:
                return Err(DuplicateEmail(email=request.email))

        validation = await self.validator.validate(request.requested_course_ids)
        if isinstance(validation, Err):
            return validation

        saved = self._persist(apply_student_request(student, request))
        if isinstance(saved, Err):
            return saved

        logger.info(f"更新学生成功: id={student_id}")
        return Ok(await self._view(saved.value))

    async def delete_student(self, student_id: int) -> Result[None, ServiceError]:
        student = self.store.find_by_id(student_id)
        if student is None:
            return Err(NotFound(entity="Student", id=student_id))

        try:
            self.store.delete(student)
        except SQLAlchemyError as e:
            return Err(Unexpected(reason=str(e)))

        logger.info(f"删除学生成功: id={student_id}")
        return Ok(None)
