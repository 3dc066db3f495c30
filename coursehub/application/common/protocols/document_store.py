"""Protocol for the document store."""

from contextlib import AbstractContextManager
from typing import Protocol

from coursehub.domain.platform.document import Document


class DocumentStoreProtocol(Protocol):
    """
    Whole-document persistence with exclusive mutation.

    There are no partial updates: readers load the full document, writers
    replace it in full.
    """

    def load(self) -> Document:
        """
        Load and validate the full document.

        Returns:
            Freshly reconstructed Document

        Raises:
            StorageError: If the data is missing, unreadable or malformed
        """
        ...

    def save(self, document: Document) -> None:
        """
        Persist the full document atomically.

        Raises:
            StorageError: If the write fails; the previous content is kept
        """
        ...

    def mutation(self) -> AbstractContextManager[Document]:
        """
        Run one load-mutate-save cycle under the store's exclusive lock.

        The yielded document is saved only when the block exits cleanly.
        Concurrent mutations are serialized, so none of them is lost.
        """
        ...
