"""Pydantic schemas for Certificate API request/response validation."""

from datetime import date

from pydantic import BaseModel, Field


class CertificateIssueRequest(BaseModel):
    """Schema for requesting a certificate."""

    usuario_id: int = Field(..., description="ID of the student")
    curso_id: int = Field(..., description="ID of the course")


class CertificateIssueResponse(BaseModel):
    """Issued certificate with display context."""

    usuario_id: int
    curso_id: int
    data_emissao: date
    usuario_nome: str
    curso_titulo: str
    progresso: int


class CourseCertificate(BaseModel):
    usuario_id: int
    data_emissao: date


class CourseCertificatesResponse(BaseModel):
    """Certificates issued for one course."""

    curso_id: int
    curso_titulo: str
    quantidade_certificados: int
    certificados: list[CourseCertificate]
