import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

@dataclass
class LLMConfig:
    """Configuration for chat-completion API calls."""
    base_url: str = "https://api.openai.com/v1"
    model_name: str = "gpt-4"
    temperature: float = 0
    max_tokens: Optional[int] = None
    api_key: Optional[str] = None
    organization: Optional[str] = None
    timeout: Optional[float] = None  # None waits for the server indefinitely

    @classmethod
    def from_env(cls) -> "LLMConfig":
        """Build a config from the OPENAI_* environment variables."""
        timeout = os.getenv("OPENAI_REQUEST_TIMEOUT")
        return cls(
            base_url=os.getenv("OPENAI_BASE_URL", cls.base_url).rstrip("/"),
            api_key=os.getenv("OPENAI_API_KEY") or None,
            organization=os.getenv("OPENAI_ORGANIZATION") or None,
            timeout=cls._parse_timeout(timeout),
        )

    @staticmethod
    def _parse_timeout(value: Optional[str]) -> Optional[float]:
        if not value:
            return None
        try:
            timeout = float(value)
        except ValueError:
            raise ConfigurationError(f"OPENAI_REQUEST_TIMEOUT must be a number of seconds, got {value!r}")
        if timeout <= 0:
            raise ConfigurationError(f"OPENAI_REQUEST_TIMEOUT must be positive, got {value!r}")
        return timeout
