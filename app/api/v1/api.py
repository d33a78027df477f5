from fastapi import APIRouter

from app.api.v1.endpoints import courses, students


# 两个服务各自独立部署，分别挂载自己的路由
student_router = APIRouter()
student_router.include_router(students.router, prefix="/students", tags=["学生"])

course_router = APIRouter()
course_router.include_router(courses.router, prefix="/courses", tags=["课程"])
