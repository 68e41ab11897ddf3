"""Groq chat completions adapter.

Talks to Groq's OpenAI-compatible HTTP API with httpx and maps every failure
onto the shared upstream exceptions. No retries.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
import structlog

from api.shared.exceptions import UpstreamError, UpstreamUnavailableError

logger = structlog.get_logger("graphify.groq")

SERVICE_NAME = "Groq"


class GroqCompletionClient:
    """Thin async client for ``POST /chat/completions``."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.groq.com/openai/v1",
        model: str = "llama-3.1-8b-instant",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def create_chat_completion(
        self,
        messages: List[Any],
        *,
        temperature: float,
        max_tokens: int,
        response_format: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send one completion request and return the decoded JSON body."""
        if not self.is_configured:
            raise UpstreamUnavailableError(
                SERVICE_NAME, "Groq API key not configured on server"
            )

        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if response_format:
            payload["response_format"] = {"type": response_format}
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                resp = await client.post(
                    f"{self.base_url}/chat/completions", json=payload, headers=headers
                )
        except httpx.TimeoutException as e:
            logger.error("groq.timeout", timeout=self.timeout, error=str(e))
            raise UpstreamUnavailableError(
                SERVICE_NAME, "Groq service timed out"
            ) from e
        except httpx.HTTPError as e:
            logger.error("groq.unreachable", error=str(e))
            raise UpstreamError(SERVICE_NAME, "Failed to reach Groq service") from e

        if resp.is_error:
            body = _json_or_empty(resp)
            logger.error("groq.error_response", status=resp.status_code, body=body)
            raise UpstreamError(
                SERVICE_NAME,
                _upstream_message(body) or f"Groq proxy error ({resp.status_code})",
                status_code=resp.status_code,
            )

        body = _json_or_empty(resp)
        logger.info("groq.completed", model=self.model, status=resp.status_code)
        return body


def _json_or_empty(resp: httpx.Response) -> Dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _upstream_message(body: Dict[str, Any]) -> Optional[str]:
    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return None


def extract_content(body: Dict[str, Any]) -> Optional[str]:
    """Return ``choices[0].message.content``, or None unless it is a non-empty string."""
    choices = body.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) and content else None
