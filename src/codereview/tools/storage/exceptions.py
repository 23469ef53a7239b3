class StorageError(Exception):
    """Base class for document storage exceptions."""
    pass

class InputNotFoundError(StorageError):
    """Raised when a named document does not resolve to a stored file."""

    def __init__(self, name: str):
        super().__init__(f"Document not found in storage: {name}")
        self.name = name

class DocumentDecodeError(StorageError):
    """Raised when a stored document is not valid UTF-8 text."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Document is not valid UTF-8: {name} ({reason})")
        self.name = name
