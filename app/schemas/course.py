from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CourseRequest(BaseModel):
    """
    课程创建/更新请求模型
    """
    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10, max_length=500)

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class CourseSummary(BaseModel):
    """
    课程摘要

    课程查询端点返回的只读快照，学生侧按请求获取，不做缓存
    """
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str


class CourseLookupRequest(BaseModel):
    """按ID集合查询课程的请求体 {"courseIds": [...]}"""
    model_config = ConfigDict(populate_by_name=True)

    course_ids: List[int] = Field(default_factory=list, alias="courseIds")
