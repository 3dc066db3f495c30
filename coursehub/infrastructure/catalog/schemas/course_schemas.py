"""Pydantic schemas for Course API request/response validation."""

from pydantic import BaseModel, Field

from coursehub.domain.catalog.entities.course import Comment as DomainComment
from coursehub.domain.catalog.entities.course import Course as DomainCourse


class Lesson(BaseModel):
    """Schema for a lesson inside a course."""

    id: int
    titulo: str
    duracao_minutos: int = Field(..., ge=0, description="Lesson length in minutes")


class Comment(BaseModel):
    """Schema for a course comment."""

    usuario_id: int
    comentario: str
    nota: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")


class Course(BaseModel):
    """Schema for Course response."""

    id: int
    titulo: str
    descricao: str
    instrutor_id: int
    aulas: list[Lesson]
    comentarios: list[Comment]


class RatedCourse(Course):
    """Course with its mean rating."""

    media_nota: float
    quantidade_comentarios: int = Field(..., ge=0)


class LessonCreateRequest(BaseModel):
    """Schema for a lesson supplied when creating a course."""

    titulo: str = Field(..., description="Lesson title")
    duracao_minutos: int = Field(..., description="Lesson length in minutes")


class CourseCreateRequest(BaseModel):
    """Schema for creating a Course."""

    titulo: str = Field(..., description="Course title")
    descricao: str = Field(..., description="Course description")
    instrutor_id: int = Field(..., description="ID of an existing instructor")
    aulas: list[LessonCreateRequest] = Field(..., description="Lessons in teaching order")


class CommentCreateRequest(BaseModel):
    """
    Schema for commenting on a course.

    The rating range is checked by the domain so that an out-of-range value
    is reported as `rating_out_of_range` rather than a generic schema error.
    """

    usuario_id: int = Field(..., description="ID of the enrolled author")
    comentario: str = Field(..., description="Comment text")
    nota: int = Field(..., description="Rating from 1 to 5")


class CommentCreateResponse(Comment):
    """Stored comment with its course and author name."""

    curso_id: int
    usuario_nome: str


class MeanProgressResponse(BaseModel):
    media: float
    quantidade_alunos: int


class MeanRatingResponse(BaseModel):
    media: float
    quantidade_comentarios: int


class CourseDurationResponse(BaseModel):
    duracao_total_minutos: int
    quantidade_aulas: int


class HighProgressStudent(BaseModel):
    usuario_id: int
    usuario_nome: str
    progresso: int
    possui_certificado: bool


class HighProgressStudentsResponse(BaseModel):
    """Students at or above a progress threshold in one course."""

    curso_id: int
    curso_titulo: str
    quantidade_alunos: int
    alunos: list[HighProgressStudent]


class CourseRemovalResponse(BaseModel):
    """Result of pruning commentless courses."""

    cursos_removidos: int = Field(..., ge=0)
    cursos_restantes: int = Field(..., ge=0)


def map_comment_to_schema(comment: DomainComment) -> Comment:
    return Comment(
        usuario_id=comment.author_id.value,
        comentario=comment.text,
        nota=comment.rating.value,
    )


def map_course_to_schema(course: DomainCourse) -> Course:
    """Map a domain Course to its response schema."""
    return Course(
        id=course.id.value,
        titulo=course.title,
        descricao=course.description,
        instrutor_id=course.instructor_id.value,
        aulas=[
            Lesson(
                id=lesson.id.value,
                titulo=lesson.title,
                duracao_minutos=lesson.duration_minutes,
            )
            for lesson in course.lessons
        ],
        comentarios=[map_comment_to_schema(comment) for comment in course.comments],
    )
