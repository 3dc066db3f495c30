"""Catalog module domain exceptions."""

from coursehub.domain.common.exceptions import EntityNotFoundError


class CourseNotFoundError(EntityNotFoundError):
    """Raised when a course cannot be found."""

    def __init__(self, course_id: int) -> None:
        super().__init__("Course", course_id)
