import json
import logging
from typing import Optional, Dict, Iterator, Sequence

import requests
from pydantic import ValidationError

from .config import LLMConfig
from .exceptions import (
    ConfigurationError,
    LLMConnectionError,
    RequestRejectedError,
    StreamInterruptedError,
)
from .types import Message, ReviewRequest, StreamEvent

logger = logging.getLogger(__name__)

DATA_PREFIX = "data:"
DONE_MARKER = "[DONE]"
# Reads return as soon as a byte is available, chunked transfer encoding or not
STREAM_READ_SIZE = 1

class LLMClient:
    def __init__(self, config: Optional[LLMConfig] = None):
        self.config = config or LLMConfig()
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "text/event-stream",
        }
        if self.config.organization:
            self.headers["OpenAI-Organization"] = self.config.organization

    def build_request(self, messages: Sequence[Message]) -> ReviewRequest:
        """Build the streamed request object for the API call."""
        return ReviewRequest(
            model=self.config.model_name,
            messages=tuple(messages),
            temperature=self.config.temperature,
            stream=True,
            max_tokens=self.config.max_tokens
        )

    def _auth_headers(self) -> Dict[str, str]:
        if not self.config.api_key:
            raise ConfigurationError("OPENAI_API_KEY is not set")
        return {**self.headers, "Authorization": f"Bearer {self.config.api_key}"}

    def _make_request(self, request: ReviewRequest) -> requests.Response:
        """Open the streamed HTTP request and check the status line."""
        headers = self._auth_headers()
        url = f"{self.config.base_url}/chat/completions"
        logger.debug("POST %s (model=%s, %d messages)", url, request.model, len(request.messages))
        try:
            response = requests.post(
                url,
                headers=headers,
                data=json.dumps(request.to_payload()),
                stream=True,
                timeout=self.config.timeout
            )
        except requests.exceptions.RequestException as e:
            raise LLMConnectionError(f"Failed to connect to LLM service: {str(e)}") from e

        if response.status_code != 200:
            try:
                message = self._error_message(response)
            finally:
                response.close()
            raise RequestRejectedError(
                f"Error {response.status_code}: {message}",
                status_code=response.status_code
            )

        return response

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Pull the API's error message out of a rejected response body."""
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            return body["error"].get("message") or response.text
        return response.text

    def _parse_line(self, line: str) -> Optional[StreamEvent]:
        """
        Parse a single server-sent-events line.

        Returns None for lines that carry no frame (blank lines, comments and
        non-data fields). The end-of-stream marker is handled by the caller.
        """
        if not line.startswith(DATA_PREFIX):
            return None
        data = line[len(DATA_PREFIX):].strip()

        try:
            frame = json.loads(data)
        except json.JSONDecodeError as e:
            raise StreamInterruptedError(f"Malformed stream frame: {data[:200]!r}") from e

        if isinstance(frame, dict) and frame.get("error"):
            error = frame["error"]
            message = error.get("message") if isinstance(error, dict) else error
            raise StreamInterruptedError(f"LLM service reported an error mid-stream: {message}")

        try:
            return StreamEvent.model_validate(frame)
        except ValidationError as e:
            raise StreamInterruptedError(f"Unexpected stream frame: {str(e)}") from e

    def stream(self, request: ReviewRequest) -> Iterator[StreamEvent]:
        """
        Send a streamed chat-completion request and yield its frames in arrival order.

        Args:
            request: The request to send; its `stream` flag must be set

        Yields:
            StreamEvent for every data frame until the server ends the stream

        Raises:
            ConfigurationError: If no API key is configured
            LLMConnectionError: If the service cannot be reached
            RequestRejectedError: If the service refuses the request
            StreamInterruptedError: If the stream breaks off or a frame is unreadable
        """
        if not request.stream:
            raise ValueError("LLMClient.stream needs a request with stream=True")

        response = self._make_request(request)
        frames = 0
        with response:
            try:
                for raw in response.iter_lines(chunk_size=STREAM_READ_SIZE):
                    line = raw.decode("utf-8")
                    if line.startswith(DATA_PREFIX) and line[len(DATA_PREFIX):].strip() == DONE_MARKER:
                        break
                    event = self._parse_line(line)
                    if event is None:
                        continue
                    frames += 1
                    yield event
            except UnicodeDecodeError as e:
                raise StreamInterruptedError(f"Undecodable bytes in stream: {str(e)}") from e
            except requests.exceptions.RequestException as e:
                raise StreamInterruptedError(f"Stream interrupted: {str(e)}") from e

        logger.debug("Stream closed after %d frames", frames)
