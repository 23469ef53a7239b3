from typing import Optional


class LLMError(Exception):
    """Base exception for LLM-related errors."""
    pass

class ConfigurationError(LLMError):
    """Raised when the client is missing the settings it needs to send a request."""
    pass

class LLMConnectionError(LLMError):
    """Raised when there's an error connecting to the LLM service."""
    pass

class RequestRejectedError(LLMError):
    """Raised when the LLM service answers the request with a non-200 status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class StreamInterruptedError(LLMError):
    """Raised when a streamed response breaks off or carries an unreadable frame."""
    pass
