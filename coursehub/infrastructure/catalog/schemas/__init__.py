"""Catalog context schemas."""

from coursehub.infrastructure.catalog.schemas.course_schemas import (
    Comment,
    CommentCreateRequest,
    CommentCreateResponse,
    Course,
    CourseCreateRequest,
    CourseDurationResponse,
    CourseRemovalResponse,
    HighProgressStudent,
    HighProgressStudentsResponse,
    Lesson,
    LessonCreateRequest,
    MeanProgressResponse,
    MeanRatingResponse,
    RatedCourse,
    map_comment_to_schema,
    map_course_to_schema,
)

__all__ = [
    "Comment",
    "CommentCreateRequest",
    "CommentCreateResponse",
    "Course",
    "CourseCreateRequest",
    "CourseDurationResponse",
    "CourseRemovalResponse",
    "HighProgressStudent",
    "HighProgressStudentsResponse",
    "Lesson",
    "LessonCreateRequest",
    "MeanProgressResponse",
    "MeanRatingResponse",
    "RatedCourse",
    "map_comment_to_schema",
    "map_course_to_schema",
]
