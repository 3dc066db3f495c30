"""
Pydantic models for the persisted JSON document.

Field names follow the stored format. Unknown keys are accepted and kept
in `model_extra` so a load/save cycle does not drop them.
"""

from datetime import date
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

PositiveId = Annotated[int, Field(gt=0)]
Percentage = Annotated[int, Field(ge=0, le=100)]


class _Record(BaseModel):
    model_config = ConfigDict(extra="allow")


class LessonRecord(_Record):
    id: PositiveId
    titulo: str
    duracao_minutos: Annotated[int, Field(ge=0)]


class CommentRecord(_Record):
    usuario_id: PositiveId
    comentario: str
    nota: Annotated[int, Field(ge=1, le=5)]


class CourseRecord(_Record):
    id: PositiveId
    titulo: str
    descricao: str
    instrutor_id: PositiveId
    aulas: list[LessonRecord] = Field(default_factory=list)
    comentarios: list[CommentRecord] = Field(default_factory=list)


class UserRecord(_Record):
    id: PositiveId
    nome: str
    email: str
    tipo: Literal["estudante", "instrutor"]
    cursos_matriculados: list[PositiveId] | None = None
    progresso: dict[PositiveId, Percentage] | None = None


class CertificateRecord(_Record):
    usuario_id: PositiveId
    curso_id: PositiveId
    data_emissao: date


class DocumentRecord(_Record):
    usuarios: list[UserRecord]
    cursos: list[CourseRecord]
    certificados: list[CertificateRecord] = Field(default_factory=list)
    ultimo_curso_id: Annotated[int, Field(ge=0)] | None = None
