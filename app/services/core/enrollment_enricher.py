import logging
from typing import Iterable, List, Optional

from app.schemas.course import CourseSummary
from app.services.core.reference_validator import CourseLookup

logger = logging.getLogger(__name__)


class EnrollmentEnricher:
    """
    读取时的课程信息补全

    尽力而为：课程服务出任何问题都只记录日志并返回空列表，
    学生记录本身的读写不受影响。
    """

    def __init__(self, lookup: CourseLookup):
        self.lookup = lookup

    async def enrich(self, enrolled_ids: Optional[Iterable[int]]) -> List[CourseSummary]:
        enrolled = set(enrolled_ids or ())
        if not enrolled:
            return []

        try:
            return list(await self.lookup.resolve(enrolled))
        except Exception as e:
            logger.warning(f"获取课程详情失败，返回空课程列表 (courseIds={sorted(enrolled)}): {e}")
            return []
