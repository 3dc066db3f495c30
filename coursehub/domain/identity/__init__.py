"""Identity module: platform users and their enrollments."""

from .entities.user import User, UserType

__all__ = ["User", "UserType"]
