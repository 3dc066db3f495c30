"""Use case for issuing a certificate on direct request."""

from collections.abc import Callable
from datetime import date

import structlog

from coursehub.application.certification.use_cases.dtos import IssuedCertificate
from coursehub.application.common.protocols.document_store import DocumentStoreProtocol
from coursehub.domain.certification.services.progress_workflow import ProgressWorkflow
from coursehub.domain.common.value_objects import CourseId, UserId

logger = structlog.get_logger(__name__)


class IssueCertificateUseCase:
    def __init__(
        self,
        document_store: DocumentStoreProtocol,
        workflow: ProgressWorkflow,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.document_store = document_store
        self.workflow = workflow
        self.today = today

    def issue_certificate(self, user_id: int, course_id: int) -> IssuedCertificate:
        """
        Issue a certificate for an eligible (user, course) pair.

        Args:
            user_id: ID of the user
            course_id: ID of the course

        Returns:
            IssuedCertificate with the certificate and display context

        Raises:
            UserNotFoundError: If the user does not exist
            CourseNotFoundError: If the course does not exist
            NotEnrolledError: If the user is not enrolled in the course
            InsufficientProgressError: If progress is below the threshold
            CertificateAlreadyIssuedError: If the pair is already certified
        """
        user_id_vo = UserId(user_id)
        course_id_vo = CourseId(course_id)

        with self.document_store.mutation() as document:
            certificate = self.workflow.issue(document, user_id_vo, course_id_vo, self.today())
            user = document.find_user(user_id_vo)
            course = document.find_course(course_id_vo)
            issued = IssuedCertificate(
                certificate=certificate,
                user_name=user.name,
                course_title=course.title,
                progress=user.progress_in(course.id).value,
            )

        logger.info(
            "certificate_issued",
            user_id=user_id,
            course_id=course_id,
            issued_on=certificate.issued_on.isoformat(),
            trigger="direct_request",
        )
        return issued
