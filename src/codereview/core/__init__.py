from .command import Command
from .prompt import build_review_messages
from .relay import StreamRelay, RelayState

__all__ = ["Command", "build_review_messages", "StreamRelay", "RelayState"]
