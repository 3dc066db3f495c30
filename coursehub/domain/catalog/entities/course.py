"""
Course entity with its lessons and comments.

Lessons and comments have no lifecycle outside their course, so they are
modeled as immutable values owned by the Course.
"""

from dataclasses import dataclass, field
from typing import Any

from coursehub.domain.common.entity import Entity
from coursehub.domain.common.exceptions import ValidationError
from coursehub.domain.common.value_objects import CourseId, LessonId, Rating, UserId


def _require_text(value: str, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} cannot be empty",
            field=field_name,
            value=value,
            code="missing_required_field",
        )


@dataclass(frozen=True)
class Lesson:
    """One lesson of a course."""

    id: LessonId
    title: str
    duration_minutes: int
    extra_fields: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        _require_text(self.title, "titulo")
        if isinstance(self.duration_minutes, bool) or not isinstance(self.duration_minutes, int):
            raise ValidationError(
                "Lesson duration must be an integer number of minutes",
                field="duracao_minutos",
                value=self.duration_minutes,
            )
        if self.duration_minutes < 0:
            raise ValidationError(
                "Lesson duration cannot be negative",
                field="duracao_minutos",
                value=self.duration_minutes,
            )


@dataclass(frozen=True)
class Comment:
    """A rated comment left on a course by an enrolled user."""

    author_id: UserId
    text: str
    rating: Rating
    extra_fields: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        _require_text(self.text, "comentario")


@dataclass(eq=False)
class Course(Entity[CourseId]):
    """
    A course taught by one instructor.

    Business Rules:
    - Title and description cannot be empty
    - Lessons keep their order; lesson ids are unique inside the course
    - Comments are append-only; authorship checks happen in the document,
      which knows about enrollments
    """

    id: CourseId
    title: str
    description: str
    instructor_id: UserId
    lessons: list[Lesson] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    extra_fields: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        _require_text(self.title, "titulo")
        _require_text(self.description, "descricao")
        lesson_ids = [lesson.id for lesson in self.lessons]
        if len(lesson_ids) != len(set(lesson_ids)):
            raise ValidationError("Lesson ids must be unique within a course", field="aulas")

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    @property
    def has_comments(self) -> bool:
        return bool(self.comments)

    def total_duration_minutes(self) -> int:
        """Sum of all lesson durations."""
        return sum(lesson.duration_minutes for lesson in self.lessons)

    def average_rating(self) -> float:
        """Mean comment rating, 0 when the course has no comments."""
        if not self.comments:
            return 0.0
        return sum(comment.rating.value for comment in self.comments) / len(self.comments)

    def comments_by(self, user_id: UserId) -> list[Comment]:
        """Return comments written by one user, in posting order."""
        return [comment for comment in self.comments if comment.author_id == user_id]

    def add_comment(self, comment: Comment) -> None:
        self.comments.append(comment)

    @classmethod
    def create(
        cls,
        id: CourseId,
        title: str,
        description: str,
        instructor_id: UserId,
        lessons: list[tuple[str, int]],
    ) -> "Course":
        """
        Create a new course with no comments.

        Args:
            id: Identifier assigned by the document
            title: Course title
            description: Course description
            instructor_id: Instructor teaching the course
            lessons: (title, duration_minutes) pairs, numbered 1..n in order;
                may be empty

        Returns:
            New Course instance

        Raises:
            ValidationError: If any field is empty or malformed
        """
        return cls(
            id=id,
            title=title.strip() if isinstance(title, str) else title,
            description=description.strip() if isinstance(description, str) else description,
            instructor_id=instructor_id,
            lessons=[
                Lesson(id=LessonId(index), title=lesson_title, duration_minutes=duration)
                for index, (lesson_title, duration) in enumerate(lessons, start=1)
            ],
            comments=[],
        )

    @classmethod
    def create_with_id(
        cls,
        id: CourseId,
        title: str,
        description: str,
        instructor_id: UserId,
        lessons: list[Lesson],
        comments: list[Comment],
        extra_fields: dict[str, Any] | None = None,
    ) -> "Course":
        """Reconstitute a course from persistence."""
        return cls(
            id=id,
            title=title,
            description=description,
            instructor_id=instructor_id,
            lessons=list(lessons),
            comments=list(comments),
            extra_fields=dict(extra_fields or {}),
        )
