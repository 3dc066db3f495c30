"""Domain service for user-centred views: filters, groupings, course status."""

from dataclasses import dataclass
from enum import StrEnum

from coursehub.domain.catalog.entities.course import Comment, Course
from coursehub.domain.certification.entities.certificate import Certificate
from coursehub.domain.certification.services.progress_workflow import (
    CERTIFICATE_THRESHOLD,
    EnrollmentState,
    ProgressWorkflow,
)
from coursehub.domain.common.value_objects import CourseId, UserId
from coursehub.domain.identity.entities.user import User, UserType
from coursehub.domain.platform.document import Document

DEFAULT_MIN_PROGRESS = 80
MISSING_COURSE_TITLE = "Curso não encontrado"


class CourseStatus(StrEnum):
    """Human-facing course status. Values are part of the API contract."""

    NOT_STARTED = "não iniciado"
    IN_PROGRESS = "em andamento"
    COMPLETED = "completo"


@dataclass(frozen=True)
class UserComment:
    comment: Comment
    course_id: CourseId
    course_title: str


@dataclass(frozen=True)
class UserGroup:
    user_type: UserType
    users: list[User]


@dataclass(frozen=True)
class UserCertificates:
    user: User
    certificates: list[Certificate]


@dataclass(frozen=True)
class CourseStatusEntry:
    course_id: CourseId
    course_title: str
    progress: int
    status: CourseStatus
    state: EnrollmentState
    has_certificate: bool


@dataclass(frozen=True)
class UserCourseStatus:
    user: User
    courses: list[CourseStatusEntry]


def status_for(progress: int) -> CourseStatus:
    if progress == 0:
        return CourseStatus.NOT_STARTED
    if progress >= CERTIFICATE_THRESHOLD:
        return CourseStatus.COMPLETED
    return CourseStatus.IN_PROGRESS


class UserViewService:
    """Stateless projections keyed on users."""

    def __init__(self, workflow: ProgressWorkflow | None = None) -> None:
        self.workflow = workflow or ProgressWorkflow()

    @staticmethod
    def instructors(document: Document) -> list[User]:
        return document.instructors()

    @staticmethod
    def courses_for_user(document: Document, user_id: UserId) -> list[Course]:
        """Courses the user is enrolled in, in document order."""
        user = document.find_user(user_id)
        return [course for course in document.courses if user.is_enrolled(course.id)]

    @staticmethod
    def students_with_progress_above(
        document: Document, min_progress: int = DEFAULT_MIN_PROGRESS
    ) -> list[User]:
        """Students with at least one course at `min_progress` or more."""
        return [
            user
            for user in document.users
            if user.is_student and user.has_progress_at_least(min_progress)
        ]

    @staticmethod
    def comments_by_user(document: Document, user_id: UserId) -> list[UserComment]:
        """Every comment the user wrote, annotated with its course."""
        return [
            UserComment(comment=comment, course_id=course.id, course_title=course.title)
            for course in document.courses
            for comment in course.comments_by(user_id)
        ]

    @staticmethod
    def users_by_type(document: Document) -> list[UserGroup]:
        """Users grouped by type, groups in order of first appearance."""
        groups: dict[UserType, list[User]] = {}
        for user in document.users:
            groups.setdefault(user.user_type, []).append(user)
        return [UserGroup(user_type=user_type, users=users) for user_type, users in groups.items()]

    @staticmethod
    def users_with_multiple_certificates(document: Document) -> list[UserCertificates]:
        result = []
        for user in document.users:
            certificates = document.certificates_for_user(user.id)
            if len(certificates) > 1:
                result.append(UserCertificates(user=user, certificates=certificates))
        return result

    def course_status(self, document: Document, user_id: UserId) -> UserCourseStatus:
        """
        Status of every course the user is enrolled in.

        Enrollments pointing at a deleted course are still listed, with a
        placeholder title.
        """
        user = document.find_user(user_id)
        entries = []
        for course_id in user.enrolled_course_ids:
            course = document.find_course_or_none(course_id)
            progress = user.progress_in(course_id).value
            entries.append(
                CourseStatusEntry(
                    course_id=course_id,
                    course_title=course.title if course else MISSING_COURSE_TITLE,
                    progress=progress,
                    status=status_for(progress),
                    state=self.workflow.state_of(document, user, course_id),
                    has_certificate=document.has_certificate(user.id, course_id),
                )
            )
        return UserCourseStatus(user=user, courses=entries)
