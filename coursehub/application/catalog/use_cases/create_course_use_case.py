"""Use case for creating courses."""

import structlog

from coursehub.application.catalog.use_cases.dtos import LessonInput
from coursehub.application.common.protocols.document_store import DocumentStoreProtocol
from coursehub.domain.catalog.entities.course import Course
from coursehub.domain.common.exceptions import BusinessRuleViolationError
from coursehub.domain.common.value_objects import UserId
from coursehub.domain.identity.exceptions import InstructorNotFoundError

logger = structlog.get_logger(__name__)


class CreateCourseUseCase:
    def __init__(self, document_store: DocumentStoreProtocol) -> None:
        self.document_store = document_store

    def create_course(
        self,
        title: str,
        description: str,
        instructor_id: int,
        lessons: list[LessonInput],
    ) -> Course:
        """
        Create a course taught by an existing instructor.

        Args:
            title: Course title
            description: Course description
            instructor_id: ID of the instructor
            lessons: Lessons in teaching order, numbered from 1

        Returns:
            Created course with its assigned id

        Raises:
            ValidationError: If a field is empty or malformed
            BusinessRuleViolationError: If the instructor does not exist
        """
        instructor_id_vo = UserId(instructor_id)

        with self.document_store.mutation() as document:
            try:
                document.find_instructor(instructor_id_vo)
            except InstructorNotFoundError as e:
                raise BusinessRuleViolationError(
                    "instructor_not_found", f"Instructor with id {instructor_id} not found"
                ) from e

            course = Course.create(
                id=document.next_course_id(),
                title=title,
                description=description,
                instructor_id=instructor_id_vo,
                lessons=[(lesson.title, lesson.duration_minutes) for lesson in lessons],
            )
            document.add_course(course)

        logger.info(
            "course_created",
            course_id=course.id.value,
            instructor_id=instructor_id,
            lesson_count=len(course.lessons),
        )
        return course
