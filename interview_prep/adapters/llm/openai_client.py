"""OpenAI LLM client adapter."""

import json
import logging
from typing import Any

from openai import AsyncOpenAI

from interview_prep.adapters.llm.base import AbstractLLMClient

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = "Output JSON only. No extra text or markdown formatting."

# Optional request parameters forwarded from kwargs
_PASSTHROUGH_PARAMS = ("max_tokens", "top_p", "frequency_penalty", "presence_penalty", "seed")


class OpenAIClient(AbstractLLMClient):
    """Client for OpenAI chat completions returning JSON objects."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        timeout_seconds: float = 45.0,
    ) -> None:
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_seconds,
        )
        self.model = model

    def _build_request(
        self,
        prompt: str,
        system: str | None,
        schema: dict[str, Any] | None,
        kwargs: dict[str, Any],
    ) -> dict[str, Any]:
        request_params: dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system or DEFAULT_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": kwargs.get("temperature", 0.2),
        }

        if schema is not None:
            request_params["response_format"] = {"type": "json_object"}

        for param in _PASSTHROUGH_PARAMS:
            if param in kwargs:
                request_params[param] = kwargs[param]

        return request_params

    async def generate_json(
        self,
        prompt: str,
        *,
        system: str | None = None,
        schema: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Generate structured JSON using OpenAI chat completions.

        Raises:
            RuntimeError: If the API call fails or the response is not a JSON object.
        """
        request_params = self._build_request(prompt, system, schema, kwargs)

        try:
            response = await self.client.chat.completions.create(**request_params)
            content = response.choices[0].message.content
        except Exception as exc:
            raise RuntimeError(f"OpenAI API error: {exc}") from exc

        if content is None or not content.strip():
            raise RuntimeError("LLM returned empty response")

        try:
            parsed = json.loads(content.strip())
        except json.JSONDecodeError as exc:
            raise RuntimeError(f"LLM returned invalid JSON: {exc}") from exc

        if not isinstance(parsed, dict):
            raise RuntimeError(
                f"LLM returned JSON {type(parsed).__name__}, expected an object"
            )

        logger.debug(
            "llm.completed",
            extra={"model": self.model, "keys": sorted(parsed)},
        )
        return parsed
