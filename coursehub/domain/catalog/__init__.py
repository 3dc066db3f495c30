"""Catalog module: courses, their lessons and comments."""

from .entities.course import Comment, Course, Lesson

__all__ = ["Comment", "Course", "Lesson"]
