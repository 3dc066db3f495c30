"""Tests for Progress value object."""

import pytest

from coursehub.domain.common.exceptions import ValidationError
from coursehub.domain.common.value_objects import Progress


class TestProgress:
    """Test suite for Progress value object."""

    def test_defaults_to_zero(self) -> None:
        assert Progress().value == 0
        assert not Progress().is_started

    @pytest.mark.parametrize("value", [-1, 101])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationError):
            Progress(value)

    def test_rejects_non_integer(self) -> None:
        with pytest.raises(ValidationError):
            Progress(50.5)  # type: ignore[arg-type]

    def test_advance_clamps_at_hundred(self) -> None:
        assert Progress(85).advance(10) == Progress(95)
        assert Progress(95).advance(10) == Progress(100)
        assert Progress(100).advance(10) == Progress(100)

    def test_advance_rejects_negative_step(self) -> None:
        with pytest.raises(ValidationError):
            Progress(50).advance(-10)

    def test_reached(self) -> None:
        assert Progress(90).reached(90)
        assert not Progress(89).reached(90)

    def test_ordering(self) -> None:
        assert Progress(10) < Progress(20)

    def test_is_frozen(self) -> None:
        progress = Progress(10)
        with pytest.raises(AttributeError):
            progress.value = 20  # type: ignore[misc]
