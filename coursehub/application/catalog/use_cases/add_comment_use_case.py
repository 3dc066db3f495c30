"""Use case for commenting on courses."""

import structlog

from coursehub.application.catalog.use_cases.dtos import CreatedComment
from coursehub.application.common.protocols.document_store import DocumentStoreProtocol
from coursehub.domain.catalog.entities.course import Comment
from coursehub.domain.common.value_objects import CourseId, Rating, UserId

logger = structlog.get_logger(__name__)


class AddCommentUseCase:
    def __init__(self, document_store: DocumentStoreProtocol) -> None:
        self.document_store = document_store

    def add_comment(self, course_id: int, user_id: int, text: str, rating: int) -> CreatedComment:
        """
        Append a rated comment to a course.

        Rating and text are validated before the document is loaded.

        Args:
            course_id: ID of the course
            user_id: ID of the author
            text: Comment text
            rating: Score from 1 to 5

        Returns:
            CreatedComment with the stored comment and author name

        Raises:
            ValidationError: If the rating is out of range or the text empty
            CourseNotFoundError: If the course does not exist
            UserNotFoundError: If the author does not exist
            NotEnrolledError: If the author is not enrolled in the course
        """
        course_id_vo = CourseId(course_id)
        comment = Comment(author_id=UserId(user_id), text=text, rating=Rating(rating))

        with self.document_store.mutation() as document:
            document.add_comment(course_id_vo, comment)
            author = document.find_user(comment.author_id)

        logger.info("comment_added", course_id=course_id, user_id=user_id, rating=rating)
        return CreatedComment(comment=comment, course_id=course_id_vo, user_name=author.name)
