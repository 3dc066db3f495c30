"""Use case for advancing a user's progress in a course."""

from collections.abc import Callable
from datetime import date

import structlog

from coursehub.application.common.protocols.document_store import DocumentStoreProtocol
from coursehub.domain.certification.services.progress_workflow import (
    ProgressUpdate,
    ProgressWorkflow,
)
from coursehub.domain.common.value_objects import CourseId, UserId

logger = structlog.get_logger(__name__)


class UpdateProgressUseCase:
    """Advance progress by one step, issuing the certificate when it becomes due."""

    def __init__(
        self,
        document_store: DocumentStoreProtocol,
        workflow: ProgressWorkflow,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.document_store = document_store
        self.workflow = workflow
        self.today = today

    def update_progress(self, user_id: int, course_id: int) -> ProgressUpdate:
        """
        Add one progress step for the user in the course.

        Progress and a certificate issued by this step are saved in the same
        write. Nothing is saved when a precondition fails.

        Args:
            user_id: ID of the user
            course_id: ID of the course

        Returns:
            ProgressUpdate with previous/current progress and the new
            certificate, if any

        Raises:
            UserNotFoundError: If the user does not exist
            CourseNotFoundError: If the course does not exist
            NotEnrolledError: If the user is not enrolled in the course
        """
        user_id_vo = UserId(user_id)
        course_id_vo = CourseId(course_id)

        with self.document_store.mutation() as document:
            update = self.workflow.advance(document, user_id_vo, course_id_vo, self.today())

        logger.info(
            "progress_updated",
            user_id=user_id,
            course_id=course_id,
            previous=update.previous.value,
            current=update.current.value,
        )
        if update.certificate is not None:
            logger.info(
                "certificate_issued",
                user_id=user_id,
                course_id=course_id,
                issued_on=update.certificate.issued_on.isoformat(),
                trigger="progress_update",
            )
        return update
