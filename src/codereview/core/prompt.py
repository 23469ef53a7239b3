"""
Review prompt

Scripted conversation that primes the model with the project's conventions
before it sees the code under review.
"""

from typing import Tuple

from codereview.tools.llm.types import Message

SYSTEM_INSTRUCTION = (
    "You are an experienced senior software developer who is familiar with Laravel and PHP. "
    "You will act as a reviewer to review this piece of code from a Github Pull Request."
)

GUIDELINE_PREAMBLE = (
    "Here is the list of Laravel and PHP conventions I want you to memorize and refer to "
    "when reviewing a PHP code snippet. The conventions are as follows: \n\n"
)

# Scripted assistant turn; the wording is part of what the model conditions on.
ASSISTANT_ACKNOWLEDGEMENT = (
    "I have read through the list of Laravel and PHP conventions you have provided and will "
    "actively refer to this conventions when reviewing your PHP code snippets. "
    "Please provide me with the PHP code snippets to be reviewed."
)


def build_review_messages(guideline: str, code: str) -> Tuple[Message, ...]:
    """
    Arrange the guideline and the code into the four-turn review conversation.

    Args:
        guideline: Conventions document, interpolated verbatim
        code: Source under review, sent verbatim as the final user turn

    Returns:
        Messages in the order system, user, assistant, user
    """
    return (
        Message(role="system", content=SYSTEM_INSTRUCTION),
        Message(role="user", content=GUIDELINE_PREAMBLE + guideline),
        Message(role="assistant", content=ASSISTANT_ACKNOWLEDGEMENT),
        Message(role="user", content=code),
    )
