import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from coursehub.application.certification.use_cases.issue_certificate_use_case import (
    IssueCertificateUseCase,
)
from coursehub.application.reporting.use_cases.course_query_use_case import CourseQueryUseCase
from coursehub.core import container
from coursehub.domain.common import DomainError
from coursehub.exceptions import CoursehubError
from coursehub.infrastructure.certification.schemas import (
    CertificateIssueRequest,
    CertificateIssueResponse,
    CourseCertificate,
    CourseCertificatesResponse,
)
from coursehub.infrastructure.common.di import inject_use_case

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/certificados", tags=["certificates"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("/por-curso", response_model=list[CourseCertificatesResponse])
def get_certificates_by_course(
    use_case: CourseQueryUseCase = Depends(inject_use_case(container.course_query_use_case)),
) -> list[CourseCertificatesResponse]:
    """Get the certificates issued for every course, courses without any included."""
    try:
        return [
            CourseCertificatesResponse(
                curso_id=entry.course.id.value,
                curso_titulo=entry.course.title,
                quantidade_certificados=len(entry.certificates),
                certificados=[
                    CourseCertificate(
                        usuario_id=certificate.user_id.value,
                        data_emissao=certificate.issued_on,
                    )
                    for certificate in entry.certificates
                ],
            )
            for entry in use_case.certificates_by_course()
        ]
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to group certificates by course: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post("", response_model=CertificateIssueResponse, status_code=status.HTTP_201_CREATED)
def issue_certificate(
    request: CertificateIssueRequest,
    use_case: IssueCertificateUseCase = Depends(
        inject_use_case(container.issue_certificate_use_case)
    ),
) -> CertificateIssueResponse:
    """
    Issue a certificate to an enrolled user who reached the threshold.

    Raises:
        HTTPException: 404 if the user or course does not exist, 400 if the
            user is not enrolled, has insufficient progress or already holds
            the certificate
    """
    try:
        issued = use_case.issue_certificate(request.usuario_id, request.curso_id)
        return CertificateIssueResponse(
            usuario_id=issued.certificate.user_id.value,
            curso_id=issued.certificate.course_id.value,
            data_emissao=issued.certificate.issued_on,
            usuario_nome=issued.user_name,
            curso_titulo=issued.course_title,
            progresso=issued.progress,
        )
    except (CoursehubError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to issue certificate for user {request.usuario_id} "
            f"in course {request.curso_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
