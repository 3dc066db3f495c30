"""Use case for read-only course queries."""

from coursehub.application.common.protocols.document_store import DocumentStoreProtocol
from coursehub.domain.catalog.entities.course import Course
from coursehub.domain.common.value_objects import CourseId, UserId
from coursehub.domain.reporting.services.course_statistics import (
    DEFAULT_HIGH_PROGRESS,
    DEFAULT_MIN_COMMENTS,
    CourseCertificates,
    CourseDuration,
    CourseStatisticsService,
    HighProgressReport,
    InstructorCourses,
    MeanProgress,
    MeanRating,
    RatedCourse,
)


class CourseQueryUseCase:
    """
    Course filters and aggregates.

    Every call loads a fresh document and never writes it back.
    """

    def __init__(
        self, document_store: DocumentStoreProtocol, statistics: CourseStatisticsService
    ) -> None:
        self.document_store = document_store
        self.statistics = statistics

    def courses_with_min_comments(self, min_comments: int = DEFAULT_MIN_COMMENTS) -> list[Course]:
        return self.statistics.courses_with_min_comments(self.document_store.load(), min_comments)

    def mean_progress(self, course_id: int) -> MeanProgress:
        return self.statistics.mean_progress(self.document_store.load(), CourseId(course_id))

    def mean_rating(self, course_id: int) -> MeanRating:
        return self.statistics.mean_rating(self.document_store.load(), CourseId(course_id))

    def total_duration(self, course_id: int) -> CourseDuration:
        return self.statistics.total_duration(self.document_store.load(), CourseId(course_id))

    def courses_for_instructor(self, instructor_id: int) -> InstructorCourses:
        return self.statistics.courses_for_instructor(
            self.document_store.load(), UserId(instructor_id)
        )

    def certificates_by_course(self) -> list[CourseCertificates]:
        return self.statistics.certificates_by_course(self.document_store.load())

    def courses_by_mean_rating(self) -> list[RatedCourse]:
        return self.statistics.courses_by_mean_rating(self.document_store.load())

    def high_progress_students(
        self, course_id: int, min_progress: int = DEFAULT_HIGH_PROGRESS
    ) -> HighProgressReport:
        return self.statistics.high_progress_students(
            self.document_store.load(), CourseId(course_id), min_progress
        )
