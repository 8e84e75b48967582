"""Prompt building blocks for the chat endpoint.

This package holds:
- The base persona prompt shared by every conversation
- One thematic addendum per dashboard topic (prayer, parable, wwjd, kindness)
- A composer that layers the addendum for a topic onto the base persona
"""

from services.prompts.composer import PromptComposer

__all__ = ["PromptComposer"]
