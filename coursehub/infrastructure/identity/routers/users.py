import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from starlette import status

from coursehub.application.certification.use_cases.update_progress_use_case import (
    UpdateProgressUseCase,
)
from coursehub.application.reporting.use_cases.user_query_use_case import UserQueryUseCase
from coursehub.core import container
from coursehub.domain.common import DomainError
from coursehub.domain.identity.entities.user import User as DomainUser
from coursehub.domain.reporting.services.user_views import DEFAULT_MIN_PROGRESS
from coursehub.exceptions import CoursehubError
from coursehub.infrastructure.catalog.schemas import Course, map_course_to_schema
from coursehub.infrastructure.common.di import inject_use_case
from coursehub.infrastructure.identity.schemas import (
    CourseStatus,
    ProgressUpdateResponse,
    User,
    UserCertificate,
    UserCertificatesResponse,
    UserComment,
    UserCourseStatusResponse,
    UserGroup,
    UserSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/usuarios", tags=["users"])

UserIdPath = Annotated[int, Path(gt=0, description="User ID")]

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


def map_user_to_schema(user: DomainUser) -> User:
    return User(
        id=user.id.value,
        nome=user.name,
        email=user.email,
        tipo=user.user_type.value,
        cursos_matriculados=[course_id.value for course_id in user.enrolled_course_ids],
        progresso={
            course_id.value: progress.value for course_id, progress in user.progress.items()
        },
    )


@router.get("/com-progresso-acima", response_model=list[User])
def get_students_with_progress_above(
    use_case: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
    min_progress: int = Query(
        DEFAULT_MIN_PROGRESS, alias="min", ge=0, le=100, description="Minimum progress"
    ),
) -> list[User]:
    """Get students with at least one course at `min` progress or more."""
    try:
        return [
            map_user_to_schema(user)
            for user in use_case.students_with_progress_above(min_progress)
        ]
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to filter users by progress: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/agrupados-por-tipo", response_model=dict[str, UserGroup])
def get_users_grouped_by_type(
    use_case: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
) -> dict[str, UserGroup]:
    """
    Get users grouped by type.

    Only types with at least one user appear, in order of first appearance.
    """
    try:
        return {
            group.user_type.value: UserGroup(
                quantidade=len(group.users),
                usuarios=[
                    UserSummary(id=user.id.value, nome=user.name, email=user.email)
                    for user in group.users
                ],
            )
            for group in use_case.users_by_type()
        }
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to group users: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/com-multiplos-certificados", response_model=list[UserCertificatesResponse])
def get_users_with_multiple_certificates(
    use_case: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
) -> list[UserCertificatesResponse]:
    try:
        return [
            UserCertificatesResponse(
                usuario_id=entry.user.id.value,
                usuario_nome=entry.user.name,
                quantidade_certificados=len(entry.certificates),
                certificados=[
                    UserCertificate(
                        curso_id=certificate.course_id.value,
                        data_emissao=certificate.issued_on,
                    )
                    for certificate in entry.certificates
                ],
            )
            for entry in use_case.users_with_multiple_certificates()
        ]
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list users with certificates: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{user_id}/cursos", response_model=list[Course])
def get_user_courses(
    user_id: UserIdPath,
    use_case: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
) -> list[Course]:
    """
    Get the courses a user is enrolled in.

    Raises:
        HTTPException: 404 if the user does not exist
    """
    try:
        return [map_course_to_schema(course) for course in use_case.courses_for_user(user_id)]
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch courses of user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{user_id}/comentarios", response_model=list[UserComment])
def get_user_comments(
    user_id: UserIdPath,
    use_case: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
) -> list[UserComment]:
    """
    Get every comment written by a user.

    An unknown user simply has no comments.
    """
    try:
        return [
            UserComment(
                usuario_id=entry.comment.author_id.value,
                comentario=entry.comment.text,
                nota=entry.comment.rating.value,
                curso_id=entry.course_id.value,
                curso_titulo=entry.course_title,
            )
            for entry in use_case.comments_by_user(user_id)
        ]
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch comments of user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{user_id}/status-cursos", response_model=UserCourseStatusResponse)
def get_user_course_status(
    user_id: UserIdPath,
    use_case: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
) -> UserCourseStatusResponse:
    """
    Get the status of every course a user is enrolled in.

    Raises:
        HTTPException: 404 if the user does not exist
    """
    try:
        result = use_case.course_status(user_id)
        return UserCourseStatusResponse(
            usuario_id=result.user.id.value,
            usuario_nome=result.user.name,
            cursos=[
                CourseStatus(
                    curso_id=entry.course_id.value,
                    curso_titulo=entry.course_title,
                    progresso=entry.progress,
                    status=entry.status.value,
                    estado=entry.state.value,
                    possui_certificado=entry.has_certificate,
                )
                for entry in result.courses
            ],
        )
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to compute course status of user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.patch("/{user_id}/progresso/{course_id}", response_model=ProgressUpdateResponse)
def update_progress(
    user_id: UserIdPath,
    course_id: Annotated[int, Path(gt=0, description="Course ID")],
    use_case: UpdateProgressUseCase = Depends(inject_use_case(container.update_progress_use_case)),
) -> ProgressUpdateResponse:
    """
    Advance a user's progress in a course by one step.

    Reaching the certificate threshold issues the certificate in the same
    write, unless the user already holds it.

    Raises:
        HTTPException: 404 if the user or course does not exist, 400 if the
            user is not enrolled
    """
    try:
        update = use_case.update_progress(user_id, course_id)
        return ProgressUpdateResponse(
            usuario_id=update.user_id.value,
            curso_id=update.course_id.value,
            progresso_anterior=update.previous.value,
            progresso_atual=update.current.value,
            certificado_emitido=update.certificate_issued,
        )
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to update progress of user {user_id} in course {course_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
