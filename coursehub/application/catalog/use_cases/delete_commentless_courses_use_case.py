"""Use case for pruning courses nobody has commented on."""

import structlog

from coursehub.application.catalog.use_cases.dtos import CourseRemovalResult
from coursehub.application.common.protocols.document_store import DocumentStoreProtocol

logger = structlog.get_logger(__name__)


class DeleteCommentlessCoursesUseCase:
    def __init__(self, document_store: DocumentStoreProtocol) -> None:
        self.document_store = document_store

    def delete_commentless_courses(self) -> CourseRemovalResult:
        """
        Keep only courses with at least one comment.

        Idempotent: a second call right after the first removes nothing.
        """
        with self.document_store.mutation() as document:
            removed = document.remove_courses(lambda course: not course.has_comments)
            remaining = len(document.courses)

        logger.info(
            "commentless_courses_deleted",
            removed=len(removed),
            removed_ids=[course.id.value for course in removed],
            remaining=remaining,
        )
        return CourseRemovalResult(removed=len(removed), remaining=remaining)
