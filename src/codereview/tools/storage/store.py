import logging
from pathlib import Path
from typing import Union

from .exceptions import DocumentDecodeError, InputNotFoundError

class DocumentStore:
    """Read-only access to text documents kept under a storage root directory."""

    def __init__(self, root: Union[str, Path] = "storage/app"):
        self.root = Path(root)
        self.logger = logging.getLogger(__name__)

    def path(self, name: str) -> Path:
        """Resolve a logical document name to its location under the root."""
        return self.root / name

    def exists(self, name: str) -> bool:
        """Check whether a document is stored under the given name."""
        candidate = self.path(name)
        if not candidate.is_file():
            return False
        # Names must not escape the storage root
        return self.root.resolve() in candidate.resolve().parents

    def get(self, name: str) -> str:
        """
        Retrieve the full text of a stored document.

        Args:
            name: Logical document name, relative to the storage root

        Returns:
            The document contents, decoded as UTF-8

        Raises:
            InputNotFoundError: If nothing is stored under that name
            DocumentDecodeError: If the stored bytes are not UTF-8
        """
        if not self.exists(name):
            raise InputNotFoundError(name)

        try:
            content = self.path(name).read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentDecodeError(name, str(e)) from e
        self.logger.debug("Loaded %s (%d characters)", name, len(content))
        return content
