"""Custom exception hierarchy for the coursehub application layer."""


class CoursehubError(Exception):
    """Base exception for all coursehub application errors."""

    code = "internal_error"

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class StorageError(CoursehubError):
    """The document could not be read, parsed or written."""

    code = "storage_error"

    def __init__(self, message: str, *, path: str | None = None) -> None:
        """Initialize with message and the path of the backing file."""
        self.path = path
        super().__init__(message, status_code=500)


class DocumentMissingError(StorageError):
    """The backing file does not exist."""

    code = "document_missing"

    def __init__(self, path: str) -> None:
        super().__init__(f"Document not found at {path}", path=path)


class MalformedDocumentError(StorageError):
    """The backing file is not valid JSON or does not match the schema."""

    code = "document_malformed"

    def __init__(self, path: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed document at {path}: {reason}", path=path)
