import asyncio

import pytest

from app.infrastructure.exceptions import CourseServiceError
from app.services.core.enrollment_enricher import EnrollmentEnricher


@pytest.mark.asyncio
async def test_empty_enrollment_skips_lookup(course_lookup):
    enricher = EnrollmentEnricher(course_lookup)

    assert await enricher.enrich(set()) == []
    assert await enricher.enrich(None) == []
    assert course_lookup.calls == []


@pytest.mark.asyncio
async def test_returns_what_the_course_service_returns(course_lookup):
    enricher = EnrollmentEnricher(course_lookup)

    courses = await enricher.enrich({101, 102})

    assert sorted(c.id for c in courses) == [101, 102]
    assert {c.title for c in courses} == {"Databases", "Distributed Systems"}


@pytest.mark.asyncio
async def test_deleted_courses_leave_a_gap(course_lookup):
    enricher = EnrollmentEnricher(course_lookup)

    courses = await enricher.enrich({101, 555})

    assert [c.id for c in courses] == [101]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        CourseServiceError("课程服务返回异常状态 503", status=503),
        CourseServiceError("课程服务请求超时"),
        asyncio.TimeoutError(),
        RuntimeError("unexpected"),
    ],
)
async def test_failures_degrade_to_empty_list(course_lookup, error):
    course_lookup.fail_with(error)
    enricher = EnrollmentEnricher(course_lookup)

    assert await enricher.enrich({201, 202}) == []
