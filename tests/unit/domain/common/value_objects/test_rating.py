"""Tests for Rating value object and entity ids."""

import pytest

from coursehub.domain.common.exceptions import ValidationError
from coursehub.domain.common.value_object import ValueObject
from coursehub.domain.common.value_objects import CourseId, Rating, UserId


class TestRating:
    @pytest.mark.parametrize("value", [1, 3, 5])
    def test_valid_ratings(self, value: int) -> None:
        assert Rating(value).value == value

    @pytest.mark.parametrize("value", [0, 6, -2])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Rating(value)
        assert exc_info.value.code == "rating_out_of_range"
        assert exc_info.value.field == "nota"

    def test_rejects_bool(self) -> None:
        with pytest.raises(ValidationError):
            Rating(True)  # type: ignore[arg-type]

    def test_compared_and_hashed_by_value(self) -> None:
        assert isinstance(Rating(4), ValueObject)
        assert len({Rating(4), Rating(4), Rating(5)}) == 2


class TestEntityIds:
    def test_ids_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            UserId(0)

    def test_ids_of_different_kinds_are_not_equal(self) -> None:
        assert UserId(1) != CourseId(1)
        assert UserId(1) == UserId(1)

    def test_str_and_int(self) -> None:
        assert str(CourseId(7)) == "7"
        assert int(CourseId(7)) == 7
