"""Loads Markdown prompt templates with YAML frontmatter and renders them with Jinja2."""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from jinja2 import BaseLoader, Environment, StrictUndefined

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).parent

_ENV = Environment(loader=BaseLoader(), undefined=StrictUndefined, autoescape=False)


@dataclass(frozen=True)
class PromptTemplate:
    id: str
    content: str
    version: str = "v1"
    description: str = ""
    requires: Tuple[str, ...] = field(default_factory=tuple)

    def render(self, **kwargs) -> str:
        missing = [name for name in self.requires if kwargs.get(name) is None]
        if missing:
            raise ValueError(f"Prompt '{self.id}' requires variables: {missing}")
        return _ENV.from_string(self.content).render(**kwargs).strip()


def get_prompt_path(prompt_id: str) -> Path:
    return PROMPTS_DIR / f"{prompt_id}.md"


@lru_cache(maxsize=16)
def get_prompt(prompt_id: str) -> PromptTemplate:
    path = get_prompt_path(prompt_id)
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")

    metadata, body = _split_frontmatter(path.read_text(encoding="utf-8"))
    return PromptTemplate(
        id=prompt_id,
        content=body,
        version=str(metadata.get("version", "v1")),
        description=metadata.get("description", ""),
        requires=tuple(metadata.get("requires") or ()),
    )


def _split_frontmatter(content: str) -> Tuple[Dict[str, Any], str]:
    if not content.startswith("---"):
        return {}, content

    _, header, body = (content.split("---", 2) + ["", ""])[:3]
    if not body:
        return {}, content

    try:
        metadata = yaml.safe_load(header) or {}
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring malformed frontmatter: {e}")
        metadata = {}
    return metadata, body.strip()


def load_prompt(prompt_id: str, **kwargs) -> str:
    return get_prompt(prompt_id).render(**kwargs)


def list_prompts() -> List[str]:
    return sorted(
        str(path.relative_to(PROMPTS_DIR).with_suffix(""))
        for path in PROMPTS_DIR.rglob("*.md")
    )


def reload_prompts() -> None:
    get_prompt.cache_clear()
