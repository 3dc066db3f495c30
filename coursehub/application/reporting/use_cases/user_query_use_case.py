"""Use case for read-only user queries."""

from coursehub.application.common.protocols.document_store import DocumentStoreProtocol
from coursehub.domain.catalog.entities.course import Course
from coursehub.domain.common.value_objects import UserId
from coursehub.domain.identity.entities.user import User
from coursehub.domain.reporting.services.user_views import (
    DEFAULT_MIN_PROGRESS,
    UserCertificates,
    UserComment,
    UserCourseStatus,
    UserGroup,
    UserViewService,
)


class UserQueryUseCase:
    """User filters, groupings and per-user course status. Never writes."""

    def __init__(self, document_store: DocumentStoreProtocol, views: UserViewService) -> None:
        self.document_store = document_store
        self.views = views

    def instructors(self) -> list[User]:
        return self.views.instructors(self.document_store.load())

    def courses_for_user(self, user_id: int) -> list[Course]:
        return self.views.courses_for_user(self.document_store.load(), UserId(user_id))

    def students_with_progress_above(self, min_progress: int = DEFAULT_MIN_PROGRESS) -> list[User]:
        return self.views.students_with_progress_above(self.document_store.load(), min_progress)

    def comments_by_user(self, user_id: int) -> list[UserComment]:
        return self.views.comments_by_user(self.document_store.load(), UserId(user_id))

    def users_by_type(self) -> list[UserGroup]:
        return self.views.users_by_type(self.document_store.load())

    def users_with_multiple_certificates(self) -> list[UserCertificates]:
        return self.views.users_with_multiple_certificates(self.document_store.load())

    def course_status(self, user_id: int) -> UserCourseStatus:
        return self.views.course_status(self.document_store.load(), UserId(user_id))
