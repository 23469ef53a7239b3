from dataclasses import dataclass
from typing import List, Dict, Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

ROLES = ("system", "user", "assistant")

@dataclass(frozen=True)
class Message:
    """Represents a single message in the conversation with the LLM."""
    role: str  # "system", "user", or "assistant"
    content: str

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}

@dataclass(frozen=True)
class ReviewRequest:
    """Represents a streamed chat-completion request to the LLM API."""
    model: str
    messages: Tuple[Message, ...]
    temperature: float = 0
    stream: bool = True
    max_tokens: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body sent to the chat-completions endpoint."""
        payload = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
            "stream": self.stream,
        }
        if self.max_tokens is not None:
            payload["max_tokens"] = self.max_tokens
        return payload


# Wire types for one `chat.completion.chunk` frame of a streamed response.

class Delta(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Optional[str] = None
    content: Optional[str] = None

class Choice(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = 0
    delta: Delta = Field(default_factory=Delta)
    finish_reason: Optional[str] = None

class StreamEvent(BaseModel):
    """One incremental unit of a streamed model response."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[Choice] = Field(default_factory=list)

    @property
    def fragment(self) -> str:
        """Text contributed by this frame; empty when the frame carries none."""
        if not self.choices:
            return ""
        return self.choices[0].delta.content or ""
