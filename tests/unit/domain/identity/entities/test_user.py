"""Tests for User entity."""

import pytest

from coursehub.domain.common.exceptions import BusinessRuleViolationError, ValidationError
from coursehub.domain.common.value_objects import CourseId, Progress, UserId
from coursehub.domain.identity.entities.user import User, UserType


def _make_student(
    enrolled: list[int] | None = None, progress: dict[int, int] | None = None
) -> User:
    return User.create_with_id(
        id=UserId(1),
        name="Ana Souza",
        email="ana@email.com",
        user_type=UserType.STUDENT,
        enrolled_course_ids=[CourseId(course_id) for course_id in enrolled or []],
        progress={CourseId(key): Progress(value) for key, value in (progress or {}).items()},
    )


class TestUser:
    """Test suite for User entity."""

    def test_empty_name_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            User.create_with_id(
                id=UserId(1), name=" ", email="a@b.com", user_type=UserType.STUDENT
            )

    def test_empty_email_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            User.create_with_id(id=UserId(1), name="Ana", email="", user_type=UserType.STUDENT)

    def test_unknown_type_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            User.create_with_id(
                id=UserId(1),
                name="Ana",
                email="a@b.com",
                user_type="admin",  # type: ignore[arg-type]
            )

    def test_type_flags(self) -> None:
        instructor = User.create_with_id(
            id=UserId(2), name="Carla", email="c@b.com", user_type=UserType.INSTRUCTOR
        )
        assert instructor.is_instructor
        assert not instructor.is_student
        assert _make_student().is_student

    def test_duplicate_enrollments_collapse(self) -> None:
        user = _make_student(enrolled=[2, 1, 2])
        assert user.enrolled_course_ids == [CourseId(2), CourseId(1)]

    def test_missing_progress_defaults_to_zero(self) -> None:
        user = _make_student(enrolled=[1])
        assert user.progress_in(CourseId(1)) == Progress(0)

    def test_has_progress_at_least(self) -> None:
        user = _make_student(enrolled=[1, 2], progress={1: 40, 2: 85})
        assert user.has_progress_at_least(80)
        assert not user.has_progress_at_least(90)

    def test_record_progress(self) -> None:
        user = _make_student(enrolled=[1], progress={1: 40})
        user.record_progress(CourseId(1), Progress(50))
        assert user.progress_in(CourseId(1)) == Progress(50)

    def test_record_progress_requires_enrollment(self) -> None:
        user = _make_student(enrolled=[1])
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            user.record_progress(CourseId(2), Progress(10))
        assert exc_info.value.code == "not_enrolled"

    def test_progress_never_decreases(self) -> None:
        user = _make_student(enrolled=[1], progress={1: 60})
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            user.record_progress(CourseId(1), Progress(50))
        assert exc_info.value.code == "progress_decrease"

    def test_equality_by_id(self) -> None:
        assert _make_student(enrolled=[1]) == _make_student(enrolled=[2])
