import logging
from typing import Optional, TextIO

from codereview.core.command import Command
from codereview.core.prompt import build_review_messages
from codereview.core.relay import StreamRelay
from codereview.tools.llm.client import LLMClient
from codereview.tools.storage.store import DocumentStore

logger = logging.getLogger(__name__)

GUIDELINE_DOCUMENT = "coding-guideline.md"
CODE_DOCUMENT = "DocumentController.php"

class CodeReviewCommand(Command):
    name = "code-review"
    description = "Review code taking into account the coding guidelines and best practices."

    def __init__(
        self,
        store: DocumentStore,
        client: LLMClient,
        output: Optional[TextIO] = None
    ):
        self.store = store
        self.client = client
        self.relay = StreamRelay(output)

    def handle(self) -> None:
        # Both documents are loaded before anything goes over the network
        guideline = self.store.get(GUIDELINE_DOCUMENT)
        code = self.store.get(CODE_DOCUMENT)

        request = self.client.build_request(build_review_messages(guideline, code))
        logger.info("Requesting review of %s from %s", CODE_DOCUMENT, request.model)
        self.relay.run(self.client, request)
