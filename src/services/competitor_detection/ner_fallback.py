"""
NER fallback for unresolved candidates.

Candidates that no gazetteer knows are sent, together with the response text,
to a hosted model that confirms which of them are organizations. The fallback
can only narrow its input: names the model invents are dropped, and any
failure yields no extra matches.
"""

import asyncio
import json
import logging
import re
from typing import List, Optional, Protocol, Sequence

import httpx
import openai

from config import settings
from services.competitor_detection.config import DetectionConfig
from services.competitor_detection.models import Candidate
from services.competitor_detection.prompts import load_prompt
from services.competitor_detection.text_utils import normalize_brand_name
from services.openai_client import OpenAIChatClient

logger = logging.getLogger(__name__)

_BRACKETED_ARRAY = re.compile(r"\[.*?\]", re.DOTALL)

SYSTEM_PROMPT_ID = "ner/organization_confirmation_system_prompt"
USER_PROMPT_ID = "ner/organization_confirmation_user_prompt"


class NERError(Exception):
    """Base class for NER failures."""


class NERTimeout(NERError):
    pass


class NERAuthFailure(NERError):
    pass


class NERRateLimited(NERError):
    pass


class NERMalformedResponse(NERError):
    pass


class NERUnavailable(NERError):
    pass


class NEREntityResolver(Protocol):
    async def confirm_organizations(self, text: str, names: Sequence[str]) -> List[str]:
        ...


class NullNERResolver:
    """Resolver used when NER is disabled: confirms nothing."""

    async def confirm_organizations(self, text: str, names: Sequence[str]) -> List[str]:
        return []


class OpenAINERResolver:
    def __init__(self, client: OpenAIChatClient):
        self.client = client

    async def confirm_organizations(self, text: str, names: Sequence[str]) -> List[str]:
        if not names:
            return []
        system_prompt = load_prompt(SYSTEM_PROMPT_ID)
        user_prompt = load_prompt(USER_PROMPT_ID, text=text, candidates=list(names))

        try:
            result = await self.client.complete(system_prompt, user_prompt)
        except (openai.APITimeoutError, httpx.TimeoutException) as e:
            raise NERTimeout(f"NER request timed out: {e}") from e
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            raise NERAuthFailure(f"NER request rejected: {e}") from e
        except openai.RateLimitError as e:
            raise NERRateLimited(f"NER request rate limited: {e}") from e
        except (openai.APIError, httpx.HTTPError) as e:
            raise NERUnavailable(f"NER service unavailable: {e}") from e
        except ValueError as e:
            raise NERAuthFailure(str(e)) from e

        return parse_name_list(result.content)


def parse_name_list(content: str) -> List[str]:
    """Parse a JSON array of names, falling back to the first bracketed array.

    Items may be plain strings or objects with a ``name`` key.
    """
    content = (content or "").strip()
    if not content:
        raise NERMalformedResponse("Empty NER response")

    parsed = _loads(content)
    if parsed is None:
        match = _BRACKETED_ARRAY.search(content)
        parsed = _loads(match.group()) if match else None
    if not isinstance(parsed, list):
        raise NERMalformedResponse(f"NER response is not a JSON array: {content[:100]}")

    names = []
    for item in parsed:
        if isinstance(item, dict):
            item = item.get("name")
        if isinstance(item, str) and item.strip():
            names.append(item.strip())
    return names


def _loads(raw: str):
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None


def build_ner_resolver(config: Optional[DetectionConfig] = None) -> NEREntityResolver:
    config = config or DetectionConfig.from_settings()
    if not config.enable_ner_fallback:
        return NullNERResolver()
    if not settings.openai_api_key:
        logger.info("No OpenAI API key configured, NER fallback disabled")
        return NullNERResolver()
    client = OpenAIChatClient(timeout_seconds=config.ner_timeout_seconds, max_retries=0)
    return OpenAINERResolver(client)


async def resolve_via_ner(
    text: str,
    unresolved: Sequence[Candidate],
    resolver: NEREntityResolver,
    config: Optional[DetectionConfig] = None,
) -> List[Candidate]:
    """Return the subset of ``unresolved`` the resolver confirms as organizations."""
    config = config or DetectionConfig()
    if not unresolved or not text or not text.strip():
        return []

    batch = list(unresolved[: config.ner_max_candidates])
    if len(unresolved) > len(batch):
        logger.debug(f"NER batch capped at {len(batch)} of {len(unresolved)} candidates")

    try:
        confirmed = await asyncio.wait_for(
            resolver.confirm_organizations(
                text[: config.ner_text_limit], [c.raw_name for c in batch]
            ),
            timeout=config.ner_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning(f"NER fallback timed out after {config.ner_timeout_seconds}s")
        return []
    except NERError as e:
        logger.warning(f"NER fallback failed ({type(e).__name__}): {e}")
        return []
    except Exception as e:
        logger.warning(f"NER fallback raised {type(e).__name__}, continuing without it: {e}")
        return []

    confirmed_keys = {normalize_brand_name(name) for name in confirmed}
    accepted = [c for c in batch if c.normalized_name in confirmed_keys]
    logger.info(f"NER confirmed {len(accepted)} of {len(batch)} candidates")
    return accepted
