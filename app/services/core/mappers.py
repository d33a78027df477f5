"""请求 / 实体 / 响应 之间的逐字段转换"""
from typing import List

from app.models.course import Course
from app.models.student import Student
from app.schemas.course import CourseRequest, CourseSummary
from app.schemas.student import StudentRequest, StudentView


def new_course(request: CourseRequest) -> Course:
    return Course(title=request.title, description=request.description)


def apply_course_request(course: Course, request: CourseRequest) -> Course:
    course.title = request.title
    course.description = request.description
    return course


def to_course_summary(course: Course) -> CourseSummary:
    return CourseSummary(id=course.id, title=course.title, description=course.description)


def new_student(request: StudentRequest) -> Student:
    student = Student(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
    )
    student.set_course_ids(request.requested_course_ids)
    return student


def apply_student_request(student: Student, request: StudentRequest) -> Student:
    student.first_name = request.first_name
    student.last_name = request.last_name
    student.email = request.email
    student.set_course_ids(request.requested_course_ids)
    return student


def to_student_view(student: Student, courses: List[CourseSummary]) -> StudentView:
    return StudentView(
        id=student.id,
        first_name=student.first_name,
        last_name=student.last_name,
        email=student.email,
        course_ids=sorted(student.course_ids),
        courses=courses,
    )
