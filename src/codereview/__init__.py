from .commands import CodeReviewCommand
from .core import build_review_messages, StreamRelay

__version__ = "0.1.0"

__all__ = ["CodeReviewCommand", "build_review_messages", "StreamRelay"]
