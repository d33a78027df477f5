"""
学生相关API接口模块

提供学生记录的增删改查。写操作会先向课程服务校验课程引用，
读操作会尽力补全课程详情，课程服务不可用时只返回空的 courses。
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_student_service
from app.infrastructure.response import service_error_response
from app.infrastructure.result import Err
from app.schemas.student import StudentRequest, StudentView
from app.services import StudentService

# 配置日志记录器
logger = logging.getLogger(__name__)

# 创建API路由实例
router = APIRouter()


# 获取学生列表接口
@router.get("", response_model=List[StudentView])
async def list_students(
        service: StudentService = Depends(get_student_service),  # 学生服务依赖注入
):
    """
    获取全部学生，按存储顺序返回，每条记录独立补全课程详情
    """
    return await service.list_students()


# 获取学生详情接口
@router.get("/{student_id}", response_model=StudentView)
async def get_student(
        student_id: int,  # 学生ID参数，从URL路径中提取
        service: StudentService = Depends(get_student_service),
):
    """
    根据ID获取学生详情

    Args:
        student_id (int): 学生唯一标识符
        service (StudentService): 学生服务，通过依赖注入自动获取

    Returns:
        StudentView: 学生信息及可解析到的课程

    Errors:
        404: 学生不存在
    """
    result = await service.get_student(student_id)
    if isinstance(result, Err):
        return service_error_response(result.error)
    return result.value


# 创建学生接口
@router.post("", response_model=StudentView, status_code=status.HTTP_201_CREATED)
async def create_student(
        student_data: StudentRequest,  # 学生创建请求体数据
        service: StudentService = Depends(get_student_service),
):
    """
    创建学生

    Args:
        student_data (StudentRequest): firstName, lastName, email, courseIds

    Returns:
        StudentView: 新建的学生信息

    Errors:
        400: 邮箱已存在 / 课程ID不存在
        502: 无法连接课程服务完成校验
    """
    result = await service.create_student(student_data)
    if isinstance(result, Err):
        return service_error_response(result.error)
    return result.value


# 更新学生接口
@router.put("/{student_id}", response_model=StudentView)
async def update_student(
        student_id: int,  # 学生ID参数，从URL路径中提取
        student_data: StudentRequest,  # 学生更新请求体数据
        service: StudentService = Depends(get_student_service),
):
    """
    整体替换学生的姓名、邮箱和已选课程

    Errors:
        404: 学生不存在
        400: 邮箱被其他学生占用 / 课程ID不存在
        502: 无法连接课程服务完成校验
    """
    result = await service.update_student(student_id, student_data)
    if isinstance(result, Err):
        return service_error_response(result.error)
    return result.value


# 删除学生接口
@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(
        student_id: int,  # 学生ID参数，从URL路径中提取
        service: StudentService = Depends(get_student_service),
):
    """
    根据ID删除学生，不存在时返回404
    """
    result = await service.delete_student(student_id)
    if isinstance(result, Err):
        return service_error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
