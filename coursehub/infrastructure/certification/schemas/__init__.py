"""Certification context schemas."""

from coursehub.infrastructure.certification.schemas.certificate_schemas import (
    CertificateIssueRequest,
    CertificateIssueResponse,
    CourseCertificate,
    CourseCertificatesResponse,
)

__all__ = [
    "CertificateIssueRequest",
    "CertificateIssueResponse",
    "CourseCertificate",
    "CourseCertificatesResponse",
]
