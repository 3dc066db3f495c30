from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class CourseId(EntityId):
    """Strongly-typed course identifier."""


@dataclass(frozen=True)
class LessonId(EntityId):
    """Lesson identifier, unique within its course."""
