"""Platform module: the document aggregate holding every entity."""

from .document import Document

__all__ = ["Document"]
