import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from starlette import status

from coursehub.application.catalog.use_cases.add_comment_use_case import AddCommentUseCase
from coursehub.application.catalog.use_cases.create_course_use_case import CreateCourseUseCase
from coursehub.application.catalog.use_cases.delete_commentless_courses_use_case import (
    DeleteCommentlessCoursesUseCase,
)
from coursehub.application.catalog.use_cases.dtos import LessonInput
from coursehub.application.reporting.use_cases.course_query_use_case import CourseQueryUseCase
from coursehub.core import container
from coursehub.domain.common import DomainError
from coursehub.domain.reporting.services.course_statistics import (
    DEFAULT_HIGH_PROGRESS,
    DEFAULT_MIN_COMMENTS,
)
from coursehub.exceptions import CoursehubError
from coursehub.infrastructure.catalog.schemas import (
    CommentCreateRequest,
    CommentCreateResponse,
    Course,
    CourseCreateRequest,
    CourseDurationResponse,
    CourseRemovalResponse,
    HighProgressStudent,
    HighProgressStudentsResponse,
    MeanProgressResponse,
    MeanRatingResponse,
    RatedCourse,
    map_course_to_schema,
)
from coursehub.infrastructure.common.di import inject_use_case

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cursos", tags=["courses"])

CourseIdPath = Annotated[int, Path(gt=0, description="Course ID")]

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("/com-muitos-comentarios", response_model=list[Course])
def get_courses_with_many_comments(
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
    min_comments: int = Query(
        DEFAULT_MIN_COMMENTS, alias="min", ge=0, description="Minimum number of comments"
    ),
) -> list[Course]:
    """Get courses with at least `min` comments, in stored order."""
    try:
        courses = use_case.courses_with_min_comments(min_comments)
        return [map_course_to_schema(course) for course in courses]
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to filter courses by comments: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/ordenados-por-nota", response_model=list[RatedCourse])
def get_courses_sorted_by_rating(
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
) -> list[RatedCourse]:
    """
    Get every course with its mean rating, best rated first.

    Courses without comments have a mean of 0. Ties keep stored order.
    """
    try:
        return [
            RatedCourse(
                **map_course_to_schema(item.course).model_dump(),
                media_nota=item.mean_rating,
                quantidade_comentarios=item.comment_count,
            )
            for item in use_case.courses_by_mean_rating()
        ]
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to sort courses by rating: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/sem-comentarios", response_model=CourseRemovalResponse)
def delete_courses_without_comments(
    use_case: DeleteCommentlessCoursesUseCase = Depends(
        inject_use_case(container.delete_commentless_courses_use_case)
    ),
) -> CourseRemovalResponse:
    """
    Delete every course that has no comments.

    Repeating the call removes nothing further.
    """
    try:
        result = use_case.delete_commentless_courses()
        return CourseRemovalResponse(
            cursos_removidos=result.removed, cursos_restantes=result.remaining
        )
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete commentless courses: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post("", response_model=Course, status_code=status.HTTP_201_CREATED)
def create_course(
    request: CourseCreateRequest,
    use_case: CreateCourseUseCase = Depends(inject_use_case(container.create_course_use_case)),
) -> Course:
    """
    Create a course taught by an existing instructor.

    Lessons are numbered from 1 in the order given.

    Raises:
        HTTPException: 400 if a field is empty or the instructor does not exist
    """
    try:
        course = use_case.create_course(
            title=request.titulo,
            description=request.descricao,
            instructor_id=request.instrutor_id,
            lessons=[
                LessonInput(title=lesson.titulo, duration_minutes=lesson.duracao_minutos)
                for lesson in request.aulas
            ],
        )
        return map_course_to_schema(course)
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create course: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post(
    "/{course_id}/comentarios",
    response_model=CommentCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    course_id: CourseIdPath,
    request: CommentCreateRequest,
    use_case: AddCommentUseCase = Depends(inject_use_case(container.add_comment_use_case)),
) -> CommentCreateResponse:
    """
    Add a rated comment to a course.

    Raises:
        HTTPException: 400 if the rating is out of range or the author is
            not enrolled, 404 if the course or author does not exist
    """
    try:
        created = use_case.add_comment(
            course_id=course_id,
            user_id=request.usuario_id,
            text=request.comentario,
            rating=request.nota,
        )
        return CommentCreateResponse(
            usuario_id=created.comment.author_id.value,
            comentario=created.comment.text,
            nota=created.comment.rating.value,
            curso_id=created.course_id.value,
            usuario_nome=created.user_name,
        )
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add comment to course {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{course_id}/media-progresso", response_model=MeanProgressResponse)
def get_mean_progress(
    course_id: CourseIdPath,
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
) -> MeanProgressResponse:
    """Get the mean progress of the students enrolled in a course."""
    try:
        result = use_case.mean_progress(course_id)
        return MeanProgressResponse(media=result.mean, quantidade_alunos=result.student_count)
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to compute mean progress of course {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{course_id}/media-nota", response_model=MeanRatingResponse)
def get_mean_rating(
    course_id: CourseIdPath,
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
) -> MeanRatingResponse:
    try:
        result = use_case.mean_rating(course_id)
        return MeanRatingResponse(media=result.mean, quantidade_comentarios=result.comment_count)
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to compute mean rating of course {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{course_id}/duracao-total", response_model=CourseDurationResponse)
def get_total_duration(
    course_id: CourseIdPath,
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
) -> CourseDurationResponse:
    try:
        result = use_case.total_duration(course_id)
        return CourseDurationResponse(
            duracao_total_minutos=result.total_minutes, quantidade_aulas=result.lesson_count
        )
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to compute duration of course {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{course_id}/alunos-progresso-alto", response_model=HighProgressStudentsResponse)
def get_high_progress_students(
    course_id: CourseIdPath,
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
    min_progress: int = Query(
        DEFAULT_HIGH_PROGRESS, alias="min", ge=0, le=100, description="Minimum progress"
    ),
) -> HighProgressStudentsResponse:
    """
    Get the users whose progress in a course is at least `min`.

    Each entry tells whether the user already holds the certificate.
    """
    try:
        report = use_case.high_progress_students(course_id, min_progress)
        students = [
            HighProgressStudent(
                usuario_id=student.user_id.value,
                usuario_nome=student.user_name,
                progresso=student.progress,
                possui_certificado=student.has_certificate,
            )
            for student in report.students
        ]
        return HighProgressStudentsResponse(
            curso_id=report.course.id.value,
            curso_titulo=report.course.title,
            quantidade_alunos=len(students),
            alunos=students,
        )
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to list high progress students of course {course_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
