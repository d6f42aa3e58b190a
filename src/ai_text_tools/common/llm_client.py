"""Outbound chat-completion client for OpenAI-compatible APIs."""
from __future__ import annotations
import logging

import httpx
from pydantic import ValidationError

from ai_text_tools.common.config import Settings
from ai_text_tools.common.schema import ChatMessage, ChatRequest, ChatResponse

LOGGER = logging.getLogger("ai_text_tools.llm")


class LLMError(Exception):
    """Base class for failed completion calls."""


class UpstreamError(LLMError):
    """The request failed in transit or the API answered with an error status."""

    def __init__(self, status_code: int | None, body: str) -> None:
        self.status_code = status_code
        self.body = body
        if status_code is None:
            super().__init__(f"request failed: {body}")
        else:
            super().__init__(f"status={status_code} body={body}")


class DecodeError(LLMError):
    """The response body was not a chat-completion payload."""


class EmptyResponseError(LLMError):
    """The API returned no choices."""


class ChatCompletionClient:
    """
    Sends a single prompt as a system+user chat and returns the reply text.

    One attempt per call: no retries or backoff. The timeout comes from
    settings and is unbounded unless configured.
    """

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        self.settings = settings
        self._transport = transport

    def build_request(self, prompt: str) -> ChatRequest:
        return ChatRequest(
            model=self.settings.model,
            messages=[
                ChatMessage(role="system", content=self.settings.system_prompt),
                ChatMessage(role="user", content=prompt),
            ],
        )

    def complete(self, prompt: str) -> str:
        """
        Run one chat completion.

        Args:
            prompt: Task prompt sent as the user message.

        Returns:
            Content of the first choice's message.

        Raises:
            UpstreamError: transport failure or HTTP status >= 400.
            DecodeError: body is not valid JSON of the expected shape.
            EmptyResponseError: the choice list is empty.
        """
        payload = self.build_request(prompt).model_dump()
        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
        }
        try:
            with httpx.Client(timeout=self.settings.timeout, transport=self._transport) as client:
                r = client.post(self.settings.api_url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise UpstreamError(None, str(e)) from e

        if r.status_code >= 400:
            raise UpstreamError(r.status_code, r.text)

        try:
            data = ChatResponse.model_validate_json(r.content)
        except ValidationError as e:
            raise DecodeError(f"malformed completion response: {e}") from e

        if not data.choices:
            raise EmptyResponseError("no choices from LLM")
        LOGGER.debug("completion ok model=%s chars=%d", self.settings.model, len(data.choices[0].message.content))
        return data.choices[0].message.content
