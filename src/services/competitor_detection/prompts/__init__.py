"""Prompt loading and rendering utilities."""

from services.competitor_detection.prompts.loader import load_prompt, get_prompt_path, reload_prompts

__all__ = ["load_prompt", "get_prompt_path", "reload_prompts"]
