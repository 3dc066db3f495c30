"""Stateless projection services. None of them mutate the document."""

from .course_statistics import CourseStatisticsService
from .user_views import UserViewService

__all__ = ["CourseStatisticsService", "UserViewService"]
