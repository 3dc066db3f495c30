"""
Document aggregate.

The whole dataset (users, courses, certificates) is persisted as one unit,
so the aggregate boundary is the document itself. Every lookup and every
cross-entity rule goes through it.
"""

from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from coursehub.domain.catalog.entities.course import Comment, Course
from coursehub.domain.catalog.exceptions import CourseNotFoundError
from coursehub.domain.certification.entities.certificate import Certificate
from coursehub.domain.certification.exceptions import (
    CertificateAlreadyIssuedError,
    CertificateNotFoundError,
    NotEnrolledError,
)
from coursehub.domain.common.exceptions import InvariantViolationError
from coursehub.domain.common.value_objects import CourseId, UserId
from coursehub.domain.identity.entities.user import User
from coursehub.domain.identity.exceptions import InstructorNotFoundError, UserNotFoundError


@dataclass
class Document:
    """
    Aggregate root for the persisted dataset.

    Business Rules:
    - User ids and course ids are unique
    - At most one certificate per (user, course) pair
    - Course ids are never reused: `last_course_id` remembers the highest
      id ever handed out, even after that course is deleted
    - A course pointing at a missing or non-instructor user is reported
      only when that course is looked up, so one bad record does not block
      unrelated requests
    """

    users: list[User] = field(default_factory=list)
    courses: list[Course] = field(default_factory=list)
    certificates: list[Certificate] = field(default_factory=list)
    last_course_id: int = 0
    extra_fields: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._ensure_unique("users", [user.id for user in self.users])
        self._ensure_unique("courses", [course.id for course in self.courses])
        self._ensure_unique("certificates", [cert.key for cert in self.certificates])

    @staticmethod
    def _ensure_unique(collection: str, keys: list[object]) -> None:
        duplicates = [key for key, count in Counter(keys).items() if count > 1]
        if duplicates:
            raise InvariantViolationError(
                "Document", f"duplicate {collection} keys: {', '.join(map(str, duplicates))}"
            )

    # Lookups

    def find_user(self, user_id: UserId) -> User:
        for user in self.users:
            if user.id == user_id:
                return user
        raise UserNotFoundError(user_id.value)

    def find_instructor(self, user_id: UserId) -> User:
        """Return the user if it exists and is an instructor."""
        for user in self.users:
            if user.id == user_id and user.is_instructor:
                return user
        raise InstructorNotFoundError(user_id.value)

    def find_course(self, course_id: CourseId) -> Course:
        """
        Return the course with the given id.

        Raises:
            CourseNotFoundError: If no course has this id
            InvariantViolationError: If the course's instructor does not
                resolve to an instructor
        """
        course = self.find_course_or_none(course_id)
        if course is None:
            raise CourseNotFoundError(course_id.value)
        self._check_instructor(course)
        return course

    def find_course_or_none(self, course_id: CourseId) -> Course | None:
        """Return the course or None, without integrity checks."""
        for course in self.courses:
            if course.id == course_id:
                return course
        return None

    def _check_instructor(self, course: Course) -> None:
        for user in self.users:
            if user.id == course.instructor_id:
                if user.is_instructor:
                    return
                break
        raise InvariantViolationError(
            "Course",
            f"course {course.id} references {course.instructor_id}, which is not an instructor",
        )

    def find_certificate(self, user_id: UserId, course_id: CourseId) -> Certificate:
        certificate = self._certificate_or_none(user_id, course_id)
        if certificate is None:
            raise CertificateNotFoundError(user_id.value, course_id.value)
        return certificate

    def _certificate_or_none(self, user_id: UserId, course_id: CourseId) -> Certificate | None:
        for certificate in self.certificates:
            if certificate.belongs_to(user_id, course_id):
                return certificate
        return None

    def has_certificate(self, user_id: UserId, course_id: CourseId) -> bool:
        return self._certificate_or_none(user_id, course_id) is not None

    def is_enrolled(self, user: User, course_id: CourseId) -> bool:
        return user.is_enrolled(course_id)

    def instructors(self) -> list[User]:
        return [user for user in self.users if user.is_instructor]

    def enrolled_users(self, course_id: CourseId) -> list[User]:
        return [user for user in self.users if user.is_enrolled(course_id)]

    def courses_taught_by(self, instructor_id: UserId) -> list[Course]:
        return [course for course in self.courses if course.instructor_id == instructor_id]

    def certificates_for_user(self, user_id: UserId) -> list[Certificate]:
        return [cert for cert in self.certificates if cert.user_id == user_id]

    def certificates_for_course(self, course_id: CourseId) -> list[Certificate]:
        return [cert for cert in self.certificates if cert.course_id == course_id]

    # Mutations

    def next_course_id(self) -> CourseId:
        """Return the next unused course id."""
        referenced = [course.id.value for course in self.courses]
        referenced += [cert.course_id.value for cert in self.certificates]
        for user in self.users:
            referenced += [course_id.value for course_id in user.enrolled_course_ids]
        return CourseId(max([self.last_course_id, *referenced]) + 1)

    def add_course(self, course: Course) -> None:
        if self.find_course_or_none(course.id) is not None:
            raise InvariantViolationError("Document", f"course id {course.id} already in use")
        if course.id.value <= self.last_course_id:
            raise InvariantViolationError("Document", f"course id {course.id} was already issued")
        self.find_instructor(course.instructor_id)
        self.courses.append(course)
        self.last_course_id = course.id.value

    def add_comment(self, course_id: CourseId, comment: Comment) -> Course:
        """
        Append a comment to a course.

        Raises:
            CourseNotFoundError: If the course does not exist
            UserNotFoundError: If the author does not exist
            NotEnrolledError: If the author is not enrolled in the course
        """
        course = self.find_course(course_id)
        author = self.find_user(comment.author_id)
        if not author.is_enrolled(course_id):
            raise NotEnrolledError(author.id.value, course_id.value)
        course.add_comment(comment)
        return course

    def add_certificate(self, certificate: Certificate) -> None:
        """
        Insert a certificate after checking the pair holds none yet.

        Raises:
            CertificateAlreadyIssuedError: If the pair is already certified
        """
        if self.has_certificate(certificate.user_id, certificate.course_id):
            raise CertificateAlreadyIssuedError(
                certificate.user_id.value, certificate.course_id.value
            )
        self.certificates.append(certificate)

    def remove_courses(self, predicate: Callable[[Course], bool]) -> list[Course]:
        """Remove every course matching `predicate` and return the removed ones."""
        removed = [course for course in self.courses if predicate(course)]
        if removed:
            self.courses = [course for course in self.courses if not predicate(course)]
            highest_removed = max(course.id.value for course in removed)
            self.last_course_id = max(self.last_course_id, highest_removed)
        return removed
