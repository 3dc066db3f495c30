"""Progress value object: completion percentage of one course."""

from dataclasses import dataclass
from typing import Self

from ..exceptions import ValidationError
from ..value_object import ValueObject

MIN_PROGRESS = 0
MAX_PROGRESS = 100


@dataclass(frozen=True, order=True)
class Progress(ValueObject):
    """
    Integer percentage in [0, 100].

    Progress only moves forward through `advance`, which clamps at 100.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                "Progress must be an integer", field="progresso", value=self.value
            )
        if not MIN_PROGRESS <= self.value <= MAX_PROGRESS:
            raise ValidationError(
                f"Progress must be between {MIN_PROGRESS} and {MAX_PROGRESS}",
                field="progresso",
                value=self.value,
            )

    def advance(self, step: int) -> Self:
        """Return the progress moved forward by `step`, clamped to 100."""
        if step < 0:
            raise ValidationError("Progress step cannot be negative", field="step", value=step)
        return type(self)(min(self.value + step, MAX_PROGRESS))

    def reached(self, threshold: int) -> bool:
        """Check whether progress is at or above `threshold`."""
        return self.value >= threshold

    @property
    def is_started(self) -> bool:
        return self.value > MIN_PROGRESS

    def __int__(self) -> int:
        return self.value
