import json
from typing import Iterable, List, Optional
from unittest.mock import MagicMock

import pytest

from codereview.tools.llm.config import LLMConfig


def chunk_line(content: Optional[str] = None, role: Optional[str] = None, finish_reason: Optional[str] = None) -> bytes:
    """Encode one `chat.completion.chunk` frame as an SSE data line."""
    delta = {}
    if role is not None:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    frame = {
        "id": "chatcmpl-test",
        "object": "chat.completion.chunk",
        "created": 1700000000,
        "model": "gpt-4",
        "choices": [{"index": 0, "delta": delta, "finish_reason": finish_reason}],
    }
    return b"data: " + json.dumps(frame).encode("utf-8")


def sse_lines(fragments: Iterable[str]) -> List[bytes]:
    """Lines of a complete stream as `iter_lines` hands them over."""
    lines = [chunk_line(role="assistant", content=""), b""]
    for fragment in fragments:
        lines += [chunk_line(content=fragment), b""]
    lines += [chunk_line(finish_reason="stop"), b"", b"data: [DONE]", b""]
    return lines


def fake_response(status_code: int = 200, lines=None, body=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text or (json.dumps(body) if body is not None else "")
    if body is not None:
        response.json.return_value = body
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    if callable(lines):
        response.iter_lines.side_effect = lambda chunk_size=None: lines()
    else:
        response.iter_lines.return_value = iter(lines or [])
    return response


@pytest.fixture
def llm_config():
    return LLMConfig(api_key="sk-test", base_url="https://llm.example.test/v1")


@pytest.fixture
def storage_root(tmp_path):
    root = tmp_path / "storage" / "app"
    root.mkdir(parents=True)
    (root / "coding-guideline.md").write_text("Use camelCase.", encoding="utf-8")
    (root / "DocumentController.php").write_text("class Foo {}", encoding="utf-8")
    return root


@pytest.fixture
def make_stream():
    return sse_lines


@pytest.fixture
def make_response():
    return fake_response


@pytest.fixture
def make_chunk():
    return chunk_line
