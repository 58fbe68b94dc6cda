"""Prompt templates, keyed by locale."""

from cinematic_mirror.prompts.prompt_set import PROMPT_SETS, PromptSet, get_prompt_set

__all__ = ["PROMPT_SETS", "PromptSet", "get_prompt_set"]
