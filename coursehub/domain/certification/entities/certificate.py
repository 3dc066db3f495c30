"""Certificate of course completion."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from coursehub.domain.common.exceptions import ValidationError
from coursehub.domain.common.value_objects import CourseId, UserId


@dataclass(frozen=True)
class Certificate:
    """
    Proof that a user completed a course.

    Business Rules:
    - At most one certificate exists per (user, course) pair; the document
      enforces this before insertion
    - Issuance is recorded as a calendar date, without time or timezone
    - Certificates are never deleted
    """

    user_id: UserId
    course_id: CourseId
    issued_on: date
    extra_fields: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not isinstance(self.issued_on, date):
            raise ValidationError(
                "Issuance date must be a calendar date", field="data_emissao", value=self.issued_on
            )

    @property
    def key(self) -> tuple[UserId, CourseId]:
        """Uniqueness key of the certificate."""
        return (self.user_id, self.course_id)

    def belongs_to(self, user_id: UserId, course_id: CourseId) -> bool:
        return self.user_id == user_id and self.course_id == course_id

    @classmethod
    def issue(cls, user_id: UserId, course_id: CourseId, today: date) -> "Certificate":
        """Create a certificate dated `today`."""
        # datetime is a date subclass; keep only the calendar part
        issued_on = date(today.year, today.month, today.day)
        return cls(user_id=user_id, course_id=course_id, issued_on=issued_on)
