"""
课程相关API接口模块

课程的增删改查，以及供学生服务调用的批量查询端点 POST /courses/byIds
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_course_service
from app.infrastructure.response import service_error_response
from app.infrastructure.result import Err
from app.schemas.course import CourseLookupRequest, CourseRequest, CourseSummary
from app.services import CourseService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[CourseSummary])
async def list_courses(service: CourseService = Depends(get_course_service)):
    return service.list_courses()


# 批量查询接口，必须注册在 /{course_id} 之前
@router.post("/byIds", response_model=List[CourseSummary])
async def lookup_courses(
        lookup: CourseLookupRequest,  # {"courseIds": [...]}
        service: CourseService = Depends(get_course_service),
):
    """
    返回请求ID中当前存在的课程，可能是子集，也可能为空
    """
    return service.lookup_courses(lookup.course_ids)


@router.get("/{course_id}", response_model=CourseSummary)
async def get_course(course_id: int, service: CourseService = Depends(get_course_service)):
    result = service.get_course(course_id)
    if isinstance(result, Err):
        return service_error_response(result.error)
    return result.value


@router.post("", response_model=CourseSummary, status_code=status.HTTP_201_CREATED)
async def create_course(
        course_data: CourseRequest,  # 课程创建请求体数据
        service: CourseService = Depends(get_course_service),
):
    result = service.create_course(course_data)
    if isinstance(result, Err):
        return service_error_response(result.error)
    return result.value


@router.put("/{course_id}", response_model=CourseSummary)
async def update_course(
        course_id: int,
        course_data: CourseRequest,
        service: CourseService = Depends(get_course_service),
):
    result = service.update_course(course_id, course_data)
    if isinstance(result, Err):
        return service_error_response(result.error)
    return result.value


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(course_id: int, service: CourseService = Depends(get_course_service)):
    result = service.delete_course(course_id)
    if isinstance(result, Err):
        return service_error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
