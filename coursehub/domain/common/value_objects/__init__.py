"""Common value objects shared across all domain modules."""

from .ids import CourseId, LessonId, UserId
from .progress import MAX_PROGRESS, MIN_PROGRESS, Progress
from .rating import MAX_RATING, MIN_RATING, Rating

__all__ = [
    # IDs
    "CourseId",
    "LessonId",
    "UserId",
    # Progress
    "MAX_PROGRESS",
    "MIN_PROGRESS",
    "Progress",
    # Rating
    "MAX_RATING",
    "MIN_RATING",
    "Rating",
]
