"""JSON file implementation of the document store."""

import contextlib
import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from coursehub.domain.common.exceptions import DomainError
from coursehub.domain.platform.document import Document
from coursehub.exceptions import DocumentMissingError, MalformedDocumentError, StorageError
from coursehub.infrastructure.storage.mappers.document_mapper import DocumentMapper
from coursehub.infrastructure.storage.records import DocumentRecord

logger = logging.getLogger(__name__)


def _describe(error: PydanticValidationError) -> str:
    """Summarize a pydantic error as 'N errors, first at <loc>: <msg>'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{error.error_count()} validation error(s), first at {location}: {first['msg']}"


class JsonDocumentStore:
    """
    Stores the whole document as one JSON file.

    Saves write a temporary file next to the target and rename it over the
    target, so readers see either the old or the new document. Mutations
    are serialized by an in-process lock held across load, mutate and save.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.mapper = DocumentMapper()
        self._lock = threading.RLock()

    def load(self) -> Document:
        """
        Read, validate and map the document.

        Raises:
            DocumentMissingError: If the file does not exist
            MalformedDocumentError: If the content is not valid JSON or does
                not match the document schema
            StorageError: If the file cannot be read
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError as e:
            raise DocumentMissingError(str(self.path)) from e
        except OSError as e:
            raise StorageError(f"Could not read document: {e}", path=str(self.path)) from e

        try:
            record = DocumentRecord.model_validate_json(raw)
        except PydanticValidationError as e:
            raise MalformedDocumentError(str(self.path), _describe(e)) from e

        try:
            document = self.mapper.to_domain(record)
        except DomainError as e:
            raise MalformedDocumentError(str(self.path), e.message) from e

        logger.debug(
            f"Loaded document {self.path}: {len(document.users)} users, "
            f"{len(document.courses)} courses, {len(document.certificates)} certificates"
        )
        return document

    def save(self, document: Document) -> None:
        """
        Replace the stored document in full.

        Raises:
            StorageError: If the document cannot be written. The previous
                file is left untouched.
        """
        payload = self.mapper.to_record(document).model_dump_json(indent=2, exclude_unset=True)
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
        except OSError as e:
            raise StorageError(f"Could not write document: {e}", path=str(self.path)) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(payload)
                tmp.write("\n")
                tmp.flush()
                os.fsync(tmp.fileno())
            if self.path.exists():
                os.chmod(tmp_name, self.path.stat().st_mode & 0o777)
            os.replace(tmp_name, self.path)
        except OSError as e:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise StorageError(f"Could not write document: {e}", path=str(self.path)) from e

        logger.info(f"Saved document {self.path}")

    @contextlib.contextmanager
    def mutation(self) -> Iterator[Document]:
        """
        Exclusive load-mutate-save cycle.

        The document is saved only if the block finishes without raising.
        """
        with self._lock:
            document = self.load()
            yield document
            self.save(document)
