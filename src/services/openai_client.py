import logging
import time
from dataclasses import dataclass
from typing import Optional

import httpx
from openai import AsyncOpenAI

from config import settings


logger = logging.getLogger(__name__)


@dataclass
class ChatCompletionResult:
    content: str
    tokens_in: int
    tokens_out: int
    latency: float


class OpenAIChatClient:
    """Chat completions over the official OpenAI client for OpenAI-compatible APIs.

    Requests are bounded by a single timeout and never retried; callers decide
    what a failure means. OpenAI exceptions are logged and re-raised as-is.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        model: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        max_retries: int = 0,
    ):
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.api_base = api_base or settings.openai_api_base
        self.model = model or settings.ner_model
        self.timeout_seconds = timeout_seconds or settings.ner_timeout_seconds
        self.max_retries = max_retries
        self._client: Optional[AsyncOpenAI] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> AsyncOpenAI:
        if not self.api_key:
            raise ValueError("OpenAI API key is not configured")
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.api_base,
                timeout=httpx.Timeout(self.timeout_seconds, connect=min(5.0, self.timeout_seconds)),
                max_retries=self.max_retries,
            )
        return self._client

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.0,
        max_tokens: int = 500,
    ) -> ChatCompletionResult:
        client = self._get_client()
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

        start_time = time.time()
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception as e:
            logger.error(f"OpenAI chat completion error ({self.model}): {e}")
            raise
        latency = time.time() - start_time

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""
        usage = response.usage
        return ChatCompletionResult(
            content=content,
            tokens_in=usage.prompt_tokens if usage else 0,
            tokens_out=usage.completion_tokens if usage else 0,
            latency=latency,
        )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
