"""
Progress and certificate workflow.

Each (user, course) pair moves through four states:

    NOT_ENROLLED -> IN_PROGRESS -> ELIGIBLE -> CERTIFIED

Progress advances in fixed steps. Crossing the certificate threshold while
no certificate exists issues one in the same operation, so the two changes
are persisted together. A certificate can also be requested directly once
the pair is ELIGIBLE.

Both paths check every precondition before touching the document, so a
failed call leaves it unchanged.
"""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from coursehub.domain.certification.entities.certificate import Certificate
from coursehub.domain.certification.exceptions import (
    CertificateAlreadyIssuedError,
    InsufficientProgressError,
    NotEnrolledError,
)
from coursehub.domain.common.value_objects import CourseId, Progress, UserId
from coursehub.domain.identity.entities.user import User
from coursehub.domain.platform.document import Document

PROGRESS_STEP = 10
CERTIFICATE_THRESHOLD = 90


class EnrollmentState(StrEnum):
    """Workflow state of one (user, course) pair."""

    NOT_ENROLLED = "not_enrolled"
    IN_PROGRESS = "in_progress"
    ELIGIBLE = "eligible"
    CERTIFIED = "certified"


@dataclass(frozen=True)
class ProgressUpdate:
    """Outcome of one progress step."""

    user_id: UserId
    course_id: CourseId
    previous: Progress
    current: Progress
    certificate: Certificate | None = None

    @property
    def certificate_issued(self) -> bool:
        return self.certificate is not None


class ProgressWorkflow:
    """Stateless domain service driving the progress/certificate state machine."""

    def __init__(
        self, step: int = PROGRESS_STEP, threshold: int = CERTIFICATE_THRESHOLD
    ) -> None:
        self.step = step
        self.threshold = threshold

    def state_of(self, document: Document, user: User, course_id: CourseId) -> EnrollmentState:
        """Classify the pair. Enrollment is checked first, then certification."""
        if not document.is_enrolled(user, course_id):
            return EnrollmentState.NOT_ENROLLED
        if document.has_certificate(user.id, course_id):
            return EnrollmentState.CERTIFIED
        if user.progress_in(course_id).reached(self.threshold):
            return EnrollmentState.ELIGIBLE
        return EnrollmentState.IN_PROGRESS

    def advance(
        self, document: Document, user_id: UserId, course_id: CourseId, today: date
    ) -> ProgressUpdate:
        """
        Move progress one step forward, issuing a certificate on the way if due.

        Args:
            document: Loaded document, mutated in place on success
            user_id: User making progress
            course_id: Course the progress belongs to
            today: Issuance date for a certificate created by this step

        Returns:
            ProgressUpdate with previous and new progress

        Raises:
            UserNotFoundError: If the user does not exist
            CourseNotFoundError: If the course does not exist
            NotEnrolledError: If the user is not enrolled in the course
        """
        user = document.find_user(user_id)
        course = document.find_course(course_id)
        if not document.is_enrolled(user, course.id):
            raise NotEnrolledError(user_id.value, course_id.value)

        previous = user.progress_in(course.id)
        current = previous.advance(self.step)

        certificate = None
        if current.reached(self.threshold) and not document.has_certificate(user.id, course.id):
            certificate = Certificate.issue(user.id, course.id, today)

        user.record_progress(course.id, current)
        if certificate is not None:
            document.add_certificate(certificate)

        return ProgressUpdate(
            user_id=user.id,
            course_id=course.id,
            previous=previous,
            current=current,
            certificate=certificate,
        )

    def issue(
        self, document: Document, user_id: UserId, course_id: CourseId, today: date
    ) -> Certificate:
        """
        Issue a certificate on direct request.

        Raises:
            UserNotFoundError: If the user does not exist
            CourseNotFoundError: If the course does not exist
            NotEnrolledError: If the user is not enrolled in the course
            InsufficientProgressError: If progress is below the threshold
            CertificateAlreadyIssuedError: If the pair is already certified
        """
        user = document.find_user(user_id)
        course = document.find_course(course_id)

        state = self.state_of(document, user, course.id)
        match state:
            case EnrollmentState.NOT_ENROLLED:
                raise NotEnrolledError(user_id.value, course_id.value)
            case EnrollmentState.IN_PROGRESS:
                raise InsufficientProgressError(user.progress_in(course.id).value, self.threshold)
            case EnrollmentState.CERTIFIED:
                raise CertificateAlreadyIssuedError(user_id.value, course_id.value)
            case EnrollmentState.ELIGIBLE:
                certificate = Certificate.issue(user.id, course.id, today)
                document.add_certificate(certificate)
                return certificate
