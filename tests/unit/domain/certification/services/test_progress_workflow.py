"""Tests for ProgressWorkflow domain service."""

from datetime import date, datetime

import pytest

from coursehub.domain.catalog.exceptions import CourseNotFoundError
from coursehub.domain.certification.exceptions import (
    CertificateAlreadyIssuedError,
    InsufficientProgressError,
    NotEnrolledError,
)
from coursehub.domain.certification.services.progress_workflow import (
    EnrollmentState,
    ProgressWorkflow,
)
from coursehub.domain.common.value_objects import CourseId, Progress, UserId
from coursehub.domain.identity.exceptions import UserNotFoundError
from coursehub.domain.platform.document import Document


@pytest.fixture
def workflow() -> ProgressWorkflow:
    return ProgressWorkflow()


class TestEnrollmentState:
    """Test suite for classifying (user, course) pairs."""

    @pytest.mark.parametrize(
        ("user_id", "course_id", "expected"),
        [
            (6, 1, EnrollmentState.NOT_ENROLLED),
            (2, 1, EnrollmentState.IN_PROGRESS),
            (5, 4, EnrollmentState.IN_PROGRESS),
            (5, 3, EnrollmentState.ELIGIBLE),
            (1, 1, EnrollmentState.CERTIFIED),
            (2, 2, EnrollmentState.CERTIFIED),
        ],
    )
    def test_state_of(
        self,
        workflow: ProgressWorkflow,
        document: Document,
        user_id: int,
        course_id: int,
        expected: EnrollmentState,
    ) -> None:
        user = document.find_user(UserId(user_id))
        assert workflow.state_of(document, user, CourseId(course_id)) == expected


class TestAdvance:
    def test_one_step(self, workflow: ProgressWorkflow, document: Document, today: date) -> None:
        update = workflow.advance(document, UserId(2), CourseId(1), today)

        assert update.previous == Progress(50)
        assert update.current == Progress(60)
        assert not update.certificate_issued
        assert document.find_user(UserId(2)).progress_in(CourseId(1)) == Progress(60)

    def test_crossing_threshold_issues_certificate(
        self, workflow: ProgressWorkflow, document: Document, today: date
    ) -> None:
        update = workflow.advance(document, UserId(5), CourseId(1), today)

        assert update.current == Progress(90)
        assert update.certificate is not None
        assert update.certificate.issued_on == today
        assert document.has_certificate(UserId(5), CourseId(1))

    def test_eligible_pair_gets_certificate_on_next_step(
        self, workflow: ProgressWorkflow, document: Document, today: date
    ) -> None:
        update = workflow.advance(document, UserId(5), CourseId(3), today)

        assert update.current == Progress(100)
        assert update.certificate_issued

    def test_certified_pair_is_not_certified_again(
        self, workflow: ProgressWorkflow, document: Document, today: date
    ) -> None:
        update = workflow.advance(document, UserId(1), CourseId(1), today)

        assert update.current == Progress(100)
        assert not update.certificate_issued
        assert len(document.certificates_for_user(UserId(1))) == 2

    def test_datetime_is_truncated_to_date(
        self, workflow: ProgressWorkflow, document: Document
    ) -> None:
        update = workflow.advance(document, UserId(5), CourseId(1), datetime(2025, 2, 3, 23, 59))

        assert update.certificate is not None
        assert type(update.certificate.issued_on) is date
        assert update.certificate.issued_on == date(2025, 2, 3)

    def test_not_enrolled(
        self, workflow: ProgressWorkflow, document: Document, today: date
    ) -> None:
        with pytest.raises(NotEnrolledError):
            workflow.advance(document, UserId(6), CourseId(1), today)
        assert CourseId(1) not in document.find_user(UserId(6)).progress

    @pytest.mark.parametrize(
        ("user_id", "course_id", "error"),
        [(99, 1, UserNotFoundError), (5, 99, CourseNotFoundError)],
    )
    def test_unknown_ids(
        self,
        workflow: ProgressWorkflow,
        document: Document,
        today: date,
        user_id: int,
        course_id: int,
        error: type[Exception],
    ) -> None:
        with pytest.raises(error):
            workflow.advance(document, UserId(user_id), CourseId(course_id), today)


class TestIssue:
    def test_eligible(self, workflow: ProgressWorkflow, document: Document, today: date) -> None:
        certificate = workflow.issue(document, UserId(5), CourseId(3), today)

        assert certificate.key == (UserId(5), CourseId(3))
        assert certificate.issued_on == today
        assert document.has_certificate(UserId(5), CourseId(3))

    def test_insufficient_progress(
        self, workflow: ProgressWorkflow, document: Document, today: date
    ) -> None:
        with pytest.raises(InsufficientProgressError) as exc_info:
            workflow.issue(document, UserId(5), CourseId(1), today)

        assert exc_info.value.progress == 80
        assert exc_info.value.code == "insufficient_progress"
        assert not document.has_certificate(UserId(5), CourseId(1))

    def test_already_issued(
        self, workflow: ProgressWorkflow, document: Document, today: date
    ) -> None:
        with pytest.raises(CertificateAlreadyIssuedError):
            workflow.issue(document, UserId(2), CourseId(2), today)
        assert len(document.certificates) == 3

    def test_not_enrolled(
        self, workflow: ProgressWorkflow, document: Document, today: date
    ) -> None:
        with pytest.raises(NotEnrolledError):
            workflow.issue(document, UserId(6), CourseId(3), today)

    def test_custom_threshold(self, document: Document, today: date) -> None:
        workflow = ProgressWorkflow(threshold=80)

        certificate = workflow.issue(document, UserId(5), CourseId(1), today)

        assert certificate.course_id == CourseId(1)
