"""Domain service for per-course filters and aggregates."""

from dataclasses import dataclass

from coursehub.domain.catalog.entities.course import Course
from coursehub.domain.certification.entities.certificate import Certificate
from coursehub.domain.common.value_objects import CourseId, UserId
from coursehub.domain.identity.entities.user import User
from coursehub.domain.platform.document import Document

DEFAULT_MIN_COMMENTS = 3
DEFAULT_HIGH_PROGRESS = 90


@dataclass(frozen=True)
class MeanProgress:
    course_id: CourseId
    mean: float
    student_count: int


@dataclass(frozen=True)
class MeanRating:
    course_id: CourseId
    mean: float
    comment_count: int


@dataclass(frozen=True)
class CourseDuration:
    course_id: CourseId
    total_minutes: int
    lesson_count: int


@dataclass(frozen=True)
class InstructorCourses:
    instructor: User
    courses: list[Course]


@dataclass(frozen=True)
class CourseCertificates:
    course: Course
    certificates: list[Certificate]


@dataclass(frozen=True)
class RatedCourse:
    course: Course
    mean_rating: float
    comment_count: int


@dataclass(frozen=True)
class HighProgressStudent:
    user_id: UserId
    user_name: str
    progress: int
    has_certificate: bool


@dataclass(frozen=True)
class HighProgressReport:
    course: Course
    students: list[HighProgressStudent]


def _rounded(value: float) -> float:
    return round(value, 2)


class CourseStatisticsService:
    """Stateless projections keyed on courses."""

    @staticmethod
    def courses_with_min_comments(
        document: Document, min_comments: int = DEFAULT_MIN_COMMENTS
    ) -> list[Course]:
        """Courses with at least `min_comments` comments, in document order."""
        return [course for course in document.courses if course.comment_count >= min_comments]

    @staticmethod
    def mean_progress(document: Document, course_id: CourseId) -> MeanProgress:
        """
        Mean progress of the users enrolled in a course.

        Users without recorded progress count as 0. A course nobody is
        enrolled in reports a mean of 0.
        """
        course = document.find_course(course_id)
        enrolled = document.enrolled_users(course.id)
        if not enrolled:
            return MeanProgress(course_id=course.id, mean=0, student_count=0)
        total = sum(user.progress_in(course.id).value for user in enrolled)
        return MeanProgress(
            course_id=course.id,
            mean=_rounded(total / len(enrolled)),
            student_count=len(enrolled),
        )

    @staticmethod
    def mean_rating(document: Document, course_id: CourseId) -> MeanRating:
        course = document.find_course(course_id)
        return MeanRating(
            course_id=course.id,
            mean=_rounded(course.average_rating()),
            comment_count=course.comment_count,
        )

    @staticmethod
    def total_duration(document: Document, course_id: CourseId) -> CourseDuration:
        course = document.find_course(course_id)
        return CourseDuration(
            course_id=course.id,
            total_minutes=course.total_duration_minutes(),
            lesson_count=len(course.lessons),
        )

    @staticmethod
    def courses_for_instructor(document: Document, instructor_id: UserId) -> InstructorCourses:
        instructor = document.find_instructor(instructor_id)
        return InstructorCourses(
            instructor=instructor, courses=document.courses_taught_by(instructor.id)
        )

    @staticmethod
    def certificates_by_course(document: Document) -> list[CourseCertificates]:
        """Every course with the certificates issued for it, zero included."""
        return [
            CourseCertificates(
                course=course, certificates=document.certificates_for_course(course.id)
            )
            for course in document.courses
        ]

    @staticmethod
    def courses_by_mean_rating(document: Document) -> list[RatedCourse]:
        """All courses sorted by mean rating, best first. Ties keep document order."""
        rated = [
            RatedCourse(
                course=course,
                mean_rating=_rounded(course.average_rating()),
                comment_count=course.comment_count,
            )
            for course in document.courses
        ]
        return sorted(rated, key=lambda item: item.mean_rating, reverse=True)

    @staticmethod
    def high_progress_students(
        document: Document, course_id: CourseId, min_progress: int = DEFAULT_HIGH_PROGRESS
    ) -> HighProgressReport:
        """Users whose recorded progress in the course is at least `min_progress`."""
        course = document.find_course(course_id)
        students = [
            HighProgressStudent(
                user_id=user.id,
                user_name=user.name,
                progress=user.progress[course.id].value,
                has_certificate=document.has_certificate(user.id, course.id),
            )
            for user in document.users
            if course.id in user.progress and user.progress[course.id].reached(min_progress)
        ]
        return HighProgressReport(course=course, students=students)
