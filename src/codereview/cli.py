import logging
import sys

from codereview.commands.code_review import CodeReviewCommand
from codereview.config.exceptions import SettingsError
from codereview.config.settings import load_settings, configure_logging
from codereview.tools.llm.client import LLMClient
from codereview.tools.llm.exceptions import LLMError
from codereview.tools.storage.exceptions import StorageError
from codereview.tools.storage.store import DocumentStore

logger = logging.getLogger(__name__)


def main() -> int:
    """Entry point for the `code-review` console command."""
    try:
        settings = load_settings()
        configure_logging(settings)
    except (SettingsError, LLMError) as e:
        logger.error(f"Configuration error: {e}")
        return 1

    command = CodeReviewCommand(
        store=DocumentStore(settings.storage_root),
        client=LLMClient(settings.llm),
    )

    try:
        command.handle()
    except StorageError as e:
        logger.error(f"Input error: {e}")
        return 1
    except LLMError as e:
        logger.error(f"API error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
