from .client import LLMClient
from .config import LLMConfig
from .exceptions import (
    LLMError,
    ConfigurationError,
    LLMConnectionError,
    RequestRejectedError,
    StreamInterruptedError,
)
from .types import Message, ReviewRequest, StreamEvent

__all__ = [
    'LLMClient',
    'LLMConfig',
    'LLMError',
    'ConfigurationError',
    'LLMConnectionError',
    'RequestRejectedError',
    'StreamInterruptedError',
    'Message',
    'ReviewRequest',
    'StreamEvent'
]
