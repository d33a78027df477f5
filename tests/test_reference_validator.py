import pytest

from app.infrastructure.exceptions import CourseServiceError
from app.infrastructure.result import Err, Ok
from app.services.core.reference_validator import ReferenceValidator
from app.services.errors import CollaboratorUnavailable, UnknownReferences


@pytest.mark.asyncio
@pytest.mark.parametrize("candidates", [set(), None])
async def test_empty_candidates_skip_lookup(course_lookup, candidates):
    validator = ReferenceValidator(course_lookup)

    result = await validator.validate(candidates)

    assert result == Ok(None)
    assert course_lookup.calls == []


@pytest.mark.asyncio
async def test_all_known_ids_pass(course_lookup):
    validator = ReferenceValidator(course_lookup)

    result = await validator.validate({101, 102})

    assert isinstance(result, Ok)
    assert course_lookup.calls == [{101, 102}]


@pytest.mark.asyncio
async def test_missing_ids_are_named_exactly(course_lookup):
    validator = ReferenceValidator(course_lookup)

    result = await validator.validate({101, 999})

    assert isinstance(result, Err)
    assert result.error == UnknownReferences(ids=frozenset({999}))
    assert result.error.detail == {"courseIds": [999]}
    assert "[999]" in result.error.message


@pytest.mark.asyncio
async def test_every_missing_id_is_reported(course_lookup):
    validator = ReferenceValidator(course_lookup)

    result = await validator.validate({101, 7, 8})

    assert result.error.ids == frozenset({7, 8})


@pytest.mark.asyncio
async def test_lookup_failure_is_collaborator_unavailable(unreachable_lookup):
    validator = ReferenceValidator(unreachable_lookup, service_name="course-service")

    result = await validator.validate({101})

    assert isinstance(result, Err)
    assert isinstance(result.error, CollaboratorUnavailable)
    assert result.error.status_code == 502
    assert result.error.service == "course-service"
    # 只调用一次，不重试
    assert len(unreachable_lookup.calls) == 1


@pytest.mark.asyncio
async def test_unknown_references_and_unavailable_are_distinct(course_lookup):
    course_lookup.fail_with(CourseServiceError("boom", status=500))
    validator = ReferenceValidator(course_lookup)

    result = await validator.validate({999})

    assert not isinstance(result.error, UnknownReferences)
