import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from starlette import status

from coursehub.application.reporting.use_cases.course_query_use_case import CourseQueryUseCase
from coursehub.application.reporting.use_cases.user_query_use_case import UserQueryUseCase
from coursehub.core import container
from coursehub.domain.common import DomainError
from coursehub.exceptions import CoursehubError
from coursehub.infrastructure.common.di import inject_use_case
from coursehub.infrastructure.identity.routers.users import map_user_to_schema
from coursehub.infrastructure.identity.schemas import (
    CourseSummary,
    InstructorCoursesResponse,
    User,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/instrutores", tags=["instructors"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("", response_model=list[User])
def get_instructors(
    use_case: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
) -> list[User]:
    try:
        return [map_user_to_schema(user) for user in use_case.instructors()]
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch instructors: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{instructor_id}/quantidade-cursos", response_model=InstructorCoursesResponse)
def get_instructor_course_count(
    instructor_id: Annotated[int, Path(gt=0, description="Instructor ID")],
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
) -> InstructorCoursesResponse:
    """
    Get the courses taught by an instructor.

    Raises:
        HTTPException: 404 if the user does not exist or is not an instructor
    """
    try:
        result = use_case.courses_for_instructor(instructor_id)
        return InstructorCoursesResponse(
            instrutor_id=result.instructor.id.value,
            instrutor_nome=result.instructor.name,
            quantidade_cursos=len(result.courses),
            cursos=[
                CourseSummary(id=course.id.value, titulo=course.title)
                for course in result.courses
            ],
        )
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to count courses of instructor {instructor_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
