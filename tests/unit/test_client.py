"""
Unit tests for the streaming LLM client.
"""

import json
from unittest.mock import patch

import pytest
import requests

from codereview.tools.llm import (
    ConfigurationError,
    LLMClient,
    LLMConfig,
    LLMConnectionError,
    LLMError,
    Message,
    RequestRejectedError,
    StreamInterruptedError,
)

POST = "codereview.tools.llm.client.requests.post"


@pytest.fixture
def client(llm_config):
    return LLMClient(llm_config)


@pytest.fixture
def request_obj(client):
    return client.build_request([Message("system", "s"), Message("user", "u")])


class TestLLMClient:

    def test_build_request(self, client, request_obj):
        assert request_obj.model == "gpt-4"
        assert request_obj.temperature == 0
        assert request_obj.stream is True
        assert isinstance(request_obj.messages, tuple)

    def test_stream_sends_request(self, client, request_obj, make_response, make_stream):
        with patch(POST, return_value=make_response(lines=make_stream(["a"]))) as mock_post:
            list(client.stream(request_obj))

        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args[0] == "https://llm.example.test/v1/chat/completions"
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
        assert kwargs["stream"] is True
        assert kwargs["timeout"] is None
        body = json.loads(kwargs["data"])
        assert body["stream"] is True
        assert body["temperature"] == 0
        assert body["messages"][1] == {"role": "user", "content": "u"}

    def test_organization_header(self, request_obj, make_response, make_stream):
        client = LLMClient(LLMConfig(api_key="sk-test", organization="org-1"))

        with patch(POST, return_value=make_response(lines=make_stream([]))) as mock_post:
            list(client.stream(request_obj))

        assert mock_post.call_args.kwargs["headers"]["OpenAI-Organization"] == "org-1"

    def test_stream_yields_frames_in_order(self, client, request_obj, make_response, make_stream):
        with patch(POST, return_value=make_response(lines=make_stream(["Looks", " good", "."]))):
            fragments = [event.fragment for event in client.stream(request_obj)]

        # role frame, three content frames, finish frame
        assert fragments == ["", "Looks", " good", ".", ""]

    def test_stream_skips_comments_and_other_fields(self, client, request_obj, make_response, make_stream):
        lines = [b": keep-alive", b"event: message", b"id: 1"] + make_stream(["x"])

        with patch(POST, return_value=make_response(lines=lines)):
            fragments = [event.fragment for event in client.stream(request_obj)]

        assert "".join(fragments) == "x"

    def test_stream_stops_at_done_marker(self, client, request_obj, make_response, make_stream):
        lines = make_stream(["a"]) + [b"data: not even json"]

        with patch(POST, return_value=make_response(lines=lines)):
            fragments = [event.fragment for event in client.stream(request_obj)]

        assert "".join(fragments) == "a"

    def test_stream_closes_response(self, client, request_obj, make_response, make_stream):
        response = make_response(lines=make_stream(["a"]))

        with patch(POST, return_value=response):
            list(client.stream(request_obj))

        response.__exit__.assert_called_once()

    def test_missing_api_key(self, request_obj):
        client = LLMClient(LLMConfig(api_key=None))

        with patch(POST) as mock_post:
            with pytest.raises(ConfigurationError):
                list(client.stream(request_obj))

        mock_post.assert_not_called()

    def test_connection_failure(self, client, request_obj):
        with patch(POST, side_effect=requests.exceptions.ConnectionError("refused")):
            with pytest.raises(LLMConnectionError):
                list(client.stream(request_obj))

    def test_rejected_request(self, client, request_obj, make_response):
        body = {"error": {"message": "Incorrect API key provided", "type": "invalid_request_error"}}
        response = make_response(status_code=401, body=body)

        with patch(POST, return_value=response) as mock_post:
            with pytest.raises(RequestRejectedError) as exc_info:
                list(client.stream(request_obj))

        assert exc_info.value.status_code == 401
        assert "Incorrect API key provided" in str(exc_info.value)
        assert isinstance(exc_info.value, LLMError)
        response.close.assert_called_once()
        mock_post.assert_called_once()

    def test_rejected_request_with_plain_body(self, client, request_obj, make_response):
        response = make_response(status_code=429, text="Too Many Requests")

        with patch(POST, return_value=response):
            with pytest.raises(RequestRejectedError, match="Too Many Requests"):
                list(client.stream(request_obj))

    def test_connection_dropped_mid_stream(self, client, request_obj, make_response, make_chunk):
        def lines():
            yield make_chunk(content="Looks")
            raise requests.exceptions.ChunkedEncodingError("Connection broken")

        with patch(POST, return_value=make_response(lines=lines)):
            stream = client.stream(request_obj)
            assert next(stream).fragment == "Looks"
            with pytest.raises(StreamInterruptedError):
                next(stream)

    @pytest.mark.parametrize("line", [
        b"data: {not json",
        b'data: {"choices": "nope"}',
        b"data: [1, 2]",
        b'data: {"error": {"message": "server overloaded"}}',
        b"data: \xff\xfe",
    ])
    def test_unreadable_frame(self, client, request_obj, make_response, line):
        with patch(POST, return_value=make_response(lines=[line])):
            with pytest.raises(StreamInterruptedError):
                list(client.stream(request_obj))

    def test_stream_requires_stream_flag(self, client):
        from codereview.tools.llm.types import ReviewRequest

        with pytest.raises(ValueError):
            list(client.stream(ReviewRequest(model="gpt-4", messages=(), stream=False)))
