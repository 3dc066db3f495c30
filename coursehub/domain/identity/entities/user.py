"""User entity: students and instructors of the platform."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, assert_never

from coursehub.domain.common.entity import Entity
from coursehub.domain.common.exceptions import BusinessRuleViolationError, ValidationError
from coursehub.domain.common.value_objects import CourseId, Progress, UserId

# Domain constraints
MAX_EMAIL_LENGTH = 254


class UserType(StrEnum):
    """Closed set of user kinds. Values are the persisted `tipo` strings."""

    STUDENT = "estudante"
    INSTRUCTOR = "instrutor"


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    A person registered on the platform.

    Business Rules:
    - Name and email cannot be empty
    - Enrollment and progress are only meaningful for students
    - Progress is tracked only for enrolled courses and never decreases
    """

    id: UserId
    name: str
    email: str
    user_type: UserType
    enrolled_course_ids: list[CourseId] = field(default_factory=list)
    progress: dict[CourseId, Progress] = field(default_factory=dict)
    extra_fields: dict[str, Any] = field(default_factory=dict, repr=False)
    # Optional stored keys (enrollments, progress) present when the user was loaded
    recorded_fields: frozenset[str] = field(default_factory=frozenset, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Name cannot be empty", field="nome", value=self.name)
        if not self.email or not self.email.strip():
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )
        if not isinstance(self.user_type, UserType):
            raise ValidationError("Unknown user type", field="tipo", value=self.user_type)
        # Duplicated enrollments collapse while keeping their original order
        self.enrolled_course_ids = list(dict.fromkeys(self.enrolled_course_ids))

    @property
    def is_instructor(self) -> bool:
        match self.user_type:
            case UserType.INSTRUCTOR:
                return True
            case UserType.STUDENT:
                return False
            case _ as unreachable:
                assert_never(unreachable)

    @property
    def is_student(self) -> bool:
        return not self.is_instructor

    def is_enrolled(self, course_id: CourseId) -> bool:
        """Check if the user is enrolled in a course."""
        return course_id in self.enrolled_course_ids

    def progress_in(self, course_id: CourseId) -> Progress:
        """Return recorded progress for a course, 0 when nothing was recorded."""
        return self.progress.get(course_id, Progress())

    def has_progress_at_least(self, threshold: int) -> bool:
        """Check if any recorded course progress reaches `threshold`."""
        return any(value.reached(threshold) for value in self.progress.values())

    def record_progress(self, course_id: CourseId, new_progress: Progress) -> None:
        """
        Store new progress for an enrolled course.

        Raises:
            BusinessRuleViolationError: If the user is not enrolled or the
                new value is lower than the recorded one
        """
        if not self.is_enrolled(course_id):
            raise BusinessRuleViolationError(
                "not_enrolled", f"User {self.id} is not enrolled in course {course_id}"
            )
        if new_progress < self.progress_in(course_id):
            raise BusinessRuleViolationError(
                "progress_decrease",
                f"Progress for course {course_id} cannot go from "
                f"{self.progress_in(course_id).value} down to {new_progress.value}",
            )
        self.progress[course_id] = new_progress

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        name: str,
        email: str,
        user_type: UserType,
        enrolled_course_ids: list[CourseId] | None = None,
        progress: dict[CourseId, Progress] | None = None,
        extra_fields: dict[str, Any] | None = None,
        recorded_fields: frozenset[str] = frozenset(),
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            name=name,
            email=email,
            user_type=user_type,
            enrolled_course_ids=list(enrolled_course_ids or []),
            progress=dict(progress or {}),
            extra_fields=dict(extra_fields or {}),
            recorded_fields=frozenset(recorded_fields),
        )
