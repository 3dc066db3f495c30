"""DTOs for catalog use cases."""

from dataclasses import dataclass

from coursehub.domain.catalog.entities.course import Comment
from coursehub.domain.common.value_objects import CourseId


@dataclass
class LessonInput:
    """Lesson data supplied when creating a course."""

    title: str
    duration_minutes: int


@dataclass
class CreatedComment:
    """DTO for a stored comment with its course and author name."""

    comment: Comment
    course_id: CourseId
    user_name: str


@dataclass
class CourseRemovalResult:
    removed: int
    remaining: int
