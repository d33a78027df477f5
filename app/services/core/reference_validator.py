import logging
from typing import Iterable, List, Optional, Protocol

from app.infrastructure.exceptions import CourseServiceError
from app.infrastructure.result import Err, Ok, Result
from app.schemas.course import CourseSummary
from app.services.errors import CollaboratorUnavailable, ServiceError, UnknownReferences

logger = logging.getLogger(__name__)


class CourseLookup(Protocol):
    async def resolve(self, course_ids: Iterable[int]) -> List[CourseSummary]:
        ...


class ReferenceValidator:
    """
    写入前的课程引用校验

    课程服务必须确认每一个ID都存在，否则拒绝本次操作；
    课程服务不可用时同样拒绝，且不自动重试。
    """

    def __init__(self, lookup: CourseLookup, service_name: str = "course-service"):
        self.lookup = lookup
        self.service_name = service_name

    async def validate(self, candidate_ids: Optional[Iterable[int]]) -> Result[None, ServiceError]:
        candidates = set(candidate_ids or ())
        if not candidates:
            return Ok(None)

        try:
            summaries = await self.lookup.resolve(candidates)
        except CourseServiceError as e:
            logger.error(f"校验课程失败，课程服务不可用: {e}")
            return Err(CollaboratorUnavailable(service=self.service_name, reason=str(e)))

        invalid = candidates - {summary.id for summary in summaries}
        if invalid:
            logger.info(f"请求中包含不存在的课程ID: {sorted(invalid)}")
            return Err(UnknownReferences(ids=frozenset(invalid)))

        return Ok(None)
