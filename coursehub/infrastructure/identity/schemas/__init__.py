"""Identity context schemas."""

from coursehub.infrastructure.identity.schemas.user_schemas import (
    CourseStatus,
    CourseSummary,
    InstructorCoursesResponse,
    ProgressUpdateResponse,
    User,
    UserCertificate,
    UserCertificatesResponse,
    UserComment,
    UserCourseStatusResponse,
    UserGroup,
    UserSummary,
)

__all__ = [
    "CourseStatus",
    "CourseSummary",
    "InstructorCoursesResponse",
    "ProgressUpdateResponse",
    "User",
    "UserCertificate",
    "UserCertificatesResponse",
    "UserComment",
    "UserCourseStatusResponse",
    "UserGroup",
    "UserSummary",
]
