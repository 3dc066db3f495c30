"""Rating value object for course comments."""

from dataclasses import dataclass

from ..exceptions import ValidationError
from ..value_object import ValueObject

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Rating(ValueObject):
    """Integer score from 1 to 5 attached to a comment."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                "Rating must be an integer",
                field="nota",
                value=self.value,
                code="rating_out_of_range",
            )
        if not MIN_RATING <= self.value <= MAX_RATING:
            raise ValidationError(
                f"Rating out of range: must be between {MIN_RATING} and {MAX_RATING}",
                field="nota",
                value=self.value,
                code="rating_out_of_range",
            )

    def __int__(self) -> int:
        return self.value
