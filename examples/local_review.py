"""
Run a review against a local OpenAI-compatible server (e.g. LM Studio) and
keep a copy of the streamed text.

    python examples/local_review.py path/to/guideline.md path/to/Controller.php
"""

import io
import sys
from pathlib import Path

from codereview.core.prompt import build_review_messages
from codereview.core.relay import StreamRelay
from codereview.tools.llm.client import LLMClient
from codereview.tools.llm.config import LLMConfig
from codereview.tools.llm.exceptions import LLMError
from codereview.tools.storage.exceptions import StorageError
from codereview.tools.storage.store import DocumentStore


class TeeSink(io.StringIO):
    """Writes to stdout and keeps what was written."""

    def write(self, text):
        sys.stdout.write(text)
        return super().write(text)

    def flush(self):
        sys.stdout.flush()


def main():
    if len(sys.argv) != 3:
        print(f"usage: {sys.argv[0]} GUIDELINE CODE", file=sys.stderr)
        return 2
    guideline_path, code_path = Path(sys.argv[1]), Path(sys.argv[2])

    # Configure LLM
    llm_config = LLMConfig(
        base_url="http://localhost:1234/v1",
        model_name="llama-3.2-3b-instruct",
        api_key="lm-studio"
    )
    client = LLMClient(config=llm_config)

    try:
        guideline = DocumentStore(guideline_path.parent).get(guideline_path.name)
        code = DocumentStore(code_path.parent).get(code_path.name)
    except StorageError as e:
        print(f"Error loading input: {str(e)}", file=sys.stderr)
        return 1

    sink = TeeSink()
    relay = StreamRelay(sink)

    try:
        relay.run(client, client.build_request(build_review_messages(guideline, code)))
    except LLMError as e:
        print(f"\nError during review: {str(e)}", file=sys.stderr)
        return 1

    print(f"\nReview finished ({len(sink.getvalue())} characters, state={relay.state.value})", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())
