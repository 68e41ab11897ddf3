"""Completion proxy: forwards chat messages to Groq and returns the first choice."""
from __future__ import annotations

from typing import Any, Optional

import structlog

from api.shared.exceptions import (
    EmptyCompletionError,
    InvalidPayloadError,
    UpstreamUnavailableError,
)
from infra.groq_client import SERVICE_NAME, GroqCompletionClient, extract_content

logger = structlog.get_logger("graphify.chat.service")

DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_TOKENS = 512


class ChatCompletionService:
    def __init__(self, completion_client: GroqCompletionClient):
        self.completion_client = completion_client

    async def complete(
        self,
        messages: Any,
        *,
        response_format: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Return the text of the first completion choice.

        Raises:
            UpstreamUnavailableError: no API key configured, or upstream timeout.
            InvalidPayloadError: ``messages`` is not a non-empty list.
            UpstreamError: upstream returned an error status or was unreachable.
            EmptyCompletionError: upstream answered without any content.
        """
        if not self.completion_client.is_configured:
            raise UpstreamUnavailableError(
                SERVICE_NAME, "Groq API key not configured on server"
            )
        if not isinstance(messages, list) or not messages:
            raise InvalidPayloadError(
                "messages array is required",
                [{"field": "messages", "message": "must be a non-empty array"}],
            )

        body = await self.completion_client.create_chat_completion(
            messages,
            temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
            max_tokens=DEFAULT_MAX_TOKENS if max_tokens is None else max_tokens,
            response_format=response_format,
        )
        content = extract_content(body)
        if not content:
            logger.warning("chat.empty_completion", model=self.completion_client.model)
            raise EmptyCompletionError(SERVICE_NAME, self.completion_client.model)
        return content
