"""Tests for the Document aggregate."""

from datetime import date

import pytest

from coursehub.domain.catalog.entities.course import Comment, Course
from coursehub.domain.catalog.exceptions import CourseNotFoundError
from coursehub.domain.certification.entities.certificate import Certificate
from coursehub.domain.certification.exceptions import (
    CertificateAlreadyIssuedError,
    CertificateNotFoundError,
    NotEnrolledError,
)
from coursehub.domain.common.exceptions import InvariantViolationError
from coursehub.domain.common.value_objects import CourseId, Rating, UserId
from coursehub.domain.identity.entities.user import User, UserType
from coursehub.domain.identity.exceptions import InstructorNotFoundError, UserNotFoundError
from coursehub.domain.platform.document import Document
from coursehub.infrastructure.common.exception_handlers import status_for_domain_error


def _new_course(course_id: int, instructor_id: int = 3) -> Course:
    return Course.create(
        id=CourseId(course_id),
        title="Testes Automatizados",
        description="pytest na prática",
        instructor_id=UserId(instructor_id),
        lessons=[("Fixtures", 15)],
    )


class TestDocumentInvariants:
    """Test suite for Document construction."""

    def test_duplicate_user_ids(self) -> None:
        user = User.create_with_id(
            id=UserId(1), name="Ana", email="a@b.com", user_type=UserType.STUDENT
        )
        with pytest.raises(InvariantViolationError):
            Document(users=[user, user])

    def test_duplicate_certificates(self) -> None:
        certificate = Certificate(
            user_id=UserId(1), course_id=CourseId(1), issued_on=date(2024, 1, 1)
        )
        with pytest.raises(InvariantViolationError):
            Document(certificates=[certificate, certificate])


class TestDocumentLookups:
    def test_find_user(self, document: Document) -> None:
        assert document.find_user(UserId(2)).name == "Bruno Lima"

    def test_find_unknown_user(self, document: Document) -> None:
        with pytest.raises(UserNotFoundError):
            document.find_user(UserId(99))

    def test_find_instructor_rejects_student(self, document: Document) -> None:
        with pytest.raises(InstructorNotFoundError):
            document.find_instructor(UserId(1))

    def test_find_unknown_course(self, document: Document) -> None:
        with pytest.raises(CourseNotFoundError):
            document.find_course(CourseId(99))

    def test_course_with_student_instructor(self, document: Document) -> None:
        document.find_course(CourseId(1)).instructor_id = UserId(1)

        with pytest.raises(InvariantViolationError):
            document.find_course(CourseId(1))
        # Other courses are still readable
        assert document.find_course(CourseId(2)).id == CourseId(2)

    def test_course_with_missing_instructor(self, document: Document) -> None:
        document.find_course(CourseId(3)).instructor_id = UserId(99)

        with pytest.raises(InvariantViolationError):
            document.find_course(CourseId(3))
        assert document.find_course_or_none(CourseId(3)) is not None

    def test_find_certificate(self, document: Document) -> None:
        certificate = document.find_certificate(UserId(1), CourseId(2))

        assert certificate.key == (UserId(1), CourseId(2))
        assert certificate.issued_on == date(2024, 4, 22)

    def test_find_missing_certificate(self, document: Document) -> None:
        with pytest.raises(CertificateNotFoundError) as exc_info:
            document.find_certificate(UserId(5), CourseId(1))
        assert exc_info.value.code == "not_found"
        assert status_for_domain_error(exc_info.value) == 404


class TestDocumentMutations:
    def test_next_course_id(self, document: Document) -> None:
        assert document.next_course_id() == CourseId(5)

    def test_add_course(self, document: Document) -> None:
        document.add_course(_new_course(5))

        assert document.find_course(CourseId(5)).title == "Testes Automatizados"
        assert document.last_course_id == 5
        assert document.next_course_id() == CourseId(6)

    def test_add_course_needs_instructor(self, document: Document) -> None:
        with pytest.raises(InstructorNotFoundError):
            document.add_course(_new_course(5, instructor_id=2))
        assert document.find_course_or_none(CourseId(5)) is None

    def test_removed_ids_are_not_reissued(self, document: Document) -> None:
        document.add_course(_new_course(5))
        removed = document.remove_courses(lambda course: course.id == CourseId(5))

        assert [course.id for course in removed] == [CourseId(5)]
        assert document.next_course_id() == CourseId(6)

    def test_remove_courses_without_match(self, document: Document) -> None:
        assert document.remove_courses(lambda course: False) == []
        assert len(document.courses) == 4

    def test_add_comment(self, document: Document) -> None:
        comment = Comment(author_id=UserId(5), text="Excelente", rating=Rating(5))

        course = document.add_comment(CourseId(4), comment)

        assert course.comments == [comment]

    def test_add_comment_requires_enrollment(self, document: Document) -> None:
        comment = Comment(author_id=UserId(6), text="Excelente", rating=Rating(5))

        with pytest.raises(NotEnrolledError):
            document.add_comment(CourseId(1), comment)
        assert document.find_course(CourseId(1)).comment_count == 3

    def test_add_certificate_once(self, document: Document) -> None:
        certificate = Certificate(
            user_id=UserId(1), course_id=CourseId(1), issued_on=date(2025, 1, 1)
        )

        with pytest.raises(CertificateAlreadyIssuedError):
            document.add_certificate(certificate)
        assert len(document.certificates) == 3
