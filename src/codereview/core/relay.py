import logging
import sys
from enum import Enum
from typing import Iterable, Optional, TextIO

from codereview.tools.llm.client import LLMClient
from codereview.tools.llm.types import ReviewRequest, StreamEvent

logger = logging.getLogger(__name__)

class RelayState(Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    STREAMING = "streaming"
    COMPLETE = "complete"
    FAILED = "failed"

class StreamRelay:
    """Forwards streamed response fragments to an output sink as they arrive."""

    def __init__(self, sink: Optional[TextIO] = None):
        self._sink = sink
        self.state = RelayState.IDLE

    @property
    def sink(self) -> TextIO:
        # Resolved late so a replaced sys.stdout is honoured
        return self._sink if self._sink is not None else sys.stdout

    def relay(self, events: Iterable[StreamEvent]) -> int:
        """
        Write every event's fragment to the sink, then a single newline.

        Each fragment is flushed on its own; nothing is inserted between
        fragments. If the event source raises, the error propagates, the text
        already written stays and no newline is added.

        Args:
            events: Stream events in arrival order

        Returns:
            Number of characters written, excluding the trailing newline
        """
        sink = self.sink
        written = 0
        try:
            for event in events:
                self.state = RelayState.STREAMING
                fragment = event.fragment
                sink.write(fragment)
                sink.flush()
                written += len(fragment)
        except Exception:
            self.state = RelayState.FAILED
            raise

        sink.write("\n")
        sink.flush()
        self.state = RelayState.COMPLETE
        logger.debug("Relayed %d characters", written)
        return written

    def run(self, client: LLMClient, request: ReviewRequest) -> int:
        """Send the request through the client and relay its streamed reply."""
        self.state = RelayState.REQUESTING
        return self.relay(client.stream(request))
