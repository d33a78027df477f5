from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.course import CourseSummary

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class StudentRequest(BaseModel):
    """
    学生创建/更新请求模型

    courseIds 缺省视为空集合，重复ID自动合并
    """
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", min_length=2, max_length=50)
    last_name: str = Field(..., alias="lastName", min_length=2, max_length=50)
    email: str = Field(..., max_length=100, pattern=EMAIL_PATTERN)
    course_ids: Optional[Set[int]] = Field(default=None, alias="courseIds")

    @property
    def requested_course_ids(self) -> Set[int]:
        return set(self.course_ids or ())


class StudentView(BaseModel):
    """
    学生响应模型

    courses 只包含本次能够从课程服务解析到的课程，可能少于 courseIds
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    course_ids: List[int] = Field(default_factory=list, alias="courseIds")
    courses: List[CourseSummary] = Field(default_factory=list)
