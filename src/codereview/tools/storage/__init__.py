from .store import DocumentStore
from .exceptions import StorageError, InputNotFoundError, DocumentDecodeError

__all__ = [
    'DocumentStore',
    'StorageError',
    'InputNotFoundError',
    'DocumentDecodeError'
]
