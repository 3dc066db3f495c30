"""Pydantic schemas for User API responses."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from coursehub.infrastructure.catalog.schemas import Comment


class User(BaseModel):
    """Schema for User response."""

    id: int
    nome: str
    email: str
    tipo: Literal["estudante", "instrutor"]
    cursos_matriculados: list[int] = Field(default_factory=list)
    progresso: dict[int, int] = Field(
        default_factory=dict, description="Progress percentage keyed by course id"
    )


class UserSummary(BaseModel):
    """Minimal user schema for grouped listings."""

    id: int
    nome: str
    email: str


class UserGroup(BaseModel):
    quantidade: int
    usuarios: list[UserSummary]


class UserComment(Comment):
    """Comment written by a user, with the course it belongs to."""

    curso_id: int
    curso_titulo: str


class CourseSummary(BaseModel):
    id: int
    titulo: str


class InstructorCoursesResponse(BaseModel):
    """Courses taught by one instructor."""

    instrutor_id: int
    instrutor_nome: str
    quantidade_cursos: int
    cursos: list[CourseSummary]


class UserCertificate(BaseModel):
    curso_id: int
    data_emissao: date


class UserCertificatesResponse(BaseModel):
    """User holding more than one certificate."""

    usuario_id: int
    usuario_nome: str
    quantidade_certificados: int
    certificados: list[UserCertificate]


class CourseStatus(BaseModel):
    curso_id: int
    curso_titulo: str
    progresso: int
    status: Literal["não iniciado", "em andamento", "completo"]
    estado: Literal["not_enrolled", "in_progress", "eligible", "certified"] = Field(
        ..., description="Certificate workflow state of the enrollment"
    )
    possui_certificado: bool


class UserCourseStatusResponse(BaseModel):
    """Status of every course a user is enrolled in."""

    usuario_id: int
    usuario_nome: str
    cursos: list[CourseStatus]


class ProgressUpdateResponse(BaseModel):
    """Outcome of one progress step."""

    usuario_id: int
    curso_id: int
    progresso_anterior: int
    progresso_atual: int
    certificado_emitido: bool
