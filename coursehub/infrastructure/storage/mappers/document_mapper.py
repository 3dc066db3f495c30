"""Mapper for stored document records ↔ domain conversion."""

from typing import Any

from coursehub.domain.catalog.entities.course import Comment, Course, Lesson
from coursehub.domain.certification.entities.certificate import Certificate
from coursehub.domain.common.value_objects import CourseId, LessonId, Progress, Rating, UserId
from coursehub.domain.identity.entities.user import User, UserType
from coursehub.domain.platform.document import Document
from coursehub.infrastructure.storage.records import (
    CertificateRecord,
    CommentRecord,
    CourseRecord,
    DocumentRecord,
    LessonRecord,
    UserRecord,
)


OPTIONAL_USER_KEYS = frozenset({"cursos_matriculados", "progresso"})


def _extra(record: Any) -> dict[str, Any]:
    return dict(record.model_extra or {})


class DocumentMapper:
    """
    Mapper for DocumentRecord ↔ Document conversion.

    Missing `cursos_matriculados` maps to no enrollments and missing
    `progresso` to no recorded progress. On the way back each key is
    written when it was stored before or when it now holds data.
    """

    def to_domain(self, record: DocumentRecord) -> Document:
        """Convert a validated record to the domain aggregate."""
        return Document(
            users=[self._user_to_domain(user) for user in record.usuarios],
            courses=[self._course_to_domain(course) for course in record.cursos],
            certificates=[self._certificate_to_domain(cert) for cert in record.certificados],
            last_course_id=record.ultimo_curso_id or 0,
            extra_fields=_extra(record),
        )

    def to_record(self, document: Document) -> DocumentRecord:
        """Convert the aggregate to a record ready for serialization."""
        fields: dict[str, Any] = {
            "usuarios": [self._user_to_record(user) for user in document.users],
            "cursos": [self._course_to_record(course) for course in document.courses],
            "certificados": [self._certificate_to_record(cert) for cert in document.certificates],
        }
        if document.last_course_id:
            fields["ultimo_curso_id"] = document.last_course_id
        return DocumentRecord(**fields, **document.extra_fields)

    def _user_to_domain(self, record: UserRecord) -> User:
        return User.create_with_id(
            id=UserId(record.id),
            name=record.nome,
            email=record.email,
            user_type=UserType(record.tipo),
            enrolled_course_ids=[
                CourseId(course_id) for course_id in record.cursos_matriculados or []
            ],
            progress={
                CourseId(course_id): Progress(value)
                for course_id, value in (record.progresso or {}).items()
            },
            extra_fields=_extra(record),
            recorded_fields=frozenset(OPTIONAL_USER_KEYS & record.model_fields_set),
        )

    def _user_to_record(self, user: User) -> UserRecord:
        fields: dict[str, Any] = {
            "id": user.id.value,
            "nome": user.name,
            "email": user.email,
            "tipo": user.user_type.value,
        }
        if "cursos_matriculados" in user.recorded_fields or user.enrolled_course_ids:
            fields["cursos_matriculados"] = [
                course_id.value for course_id in user.enrolled_course_ids
            ]
        if "progresso" in user.recorded_fields or user.progress:
            fields["progresso"] = {
                course_id.value: progress.value for course_id, progress in user.progress.items()
            }
        return UserRecord(**fields, **user.extra_fields)

    def _course_to_domain(self, record: CourseRecord) -> Course:
        return Course.create_with_id(
            id=CourseId(record.id),
            title=record.titulo,
            description=record.descricao,
            instructor_id=UserId(record.instrutor_id),
            lessons=[
                Lesson(
                    id=LessonId(lesson.id),
                    title=lesson.titulo,
                    duration_minutes=lesson.duracao_minutos,
                    extra_fields=_extra(lesson),
                )
                for lesson in record.aulas
            ],
            comments=[
                Comment(
                    author_id=UserId(comment.usuario_id),
                    text=comment.comentario,
                    rating=Rating(comment.nota),
                    extra_fields=_extra(comment),
                )
                for comment in record.comentarios
            ],
            extra_fields=_extra(record),
        )

    def _course_to_record(self, course: Course) -> CourseRecord:
        return CourseRecord(
            id=course.id.value,
            titulo=course.title,
            descricao=course.description,
            instrutor_id=course.instructor_id.value,
            aulas=[
                LessonRecord(
                    id=lesson.id.value,
                    titulo=lesson.title,
                    duracao_minutos=lesson.duration_minutes,
                    **lesson.extra_fields,
                )
                for lesson in course.lessons
            ],
            comentarios=[self._comment_to_record(comment) for comment in course.comments],
            **course.extra_fields,
        )

    def _comment_to_record(self, comment: Comment) -> CommentRecord:
        return CommentRecord(
            usuario_id=comment.author_id.value,
            comentario=comment.text,
            nota=comment.rating.value,
            **comment.extra_fields,
        )

    def _certificate_to_domain(self, record: CertificateRecord) -> Certificate:
        return Certificate(
            user_id=UserId(record.usuario_id),
            course_id=CourseId(record.curso_id),
            issued_on=record.data_emissao,
            extra_fields=_extra(record),
        )

    def _certificate_to_record(self, certificate: Certificate) -> CertificateRecord:
        return CertificateRecord(
            usuario_id=certificate.user_id.value,
            curso_id=certificate.course_id.value,
            data_emissao=certificate.issued_on,
            **certificate.extra_fields,
        )
