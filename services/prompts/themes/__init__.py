from __future__ import annotations

from typing import Optional

from services.prompts.themes.kindness import KINDNESS_THEME_ID, KINDNESS_THEME_PROMPT
from services.prompts.themes.parable import PARABLE_THEME_ID, PARABLE_THEME_PROMPT
from services.prompts.themes.prayer import PRAYER_THEME_ID, PRAYER_THEME_PROMPT
from services.prompts.themes.wwjd import WWJD_THEME_ID, WWJD_THEME_PROMPT

_THEME_PROMPTS = {
    PRAYER_THEME_ID: PRAYER_THEME_PROMPT,
    PARABLE_THEME_ID: PARABLE_THEME_PROMPT,
    WWJD_THEME_ID: WWJD_THEME_PROMPT,
    KINDNESS_THEME_ID: KINDNESS_THEME_PROMPT,
}


def get_theme_prompt(theme_id: Optional[str]) -> str:
    if not theme_id:
        return ""
    return _THEME_PROMPTS.get(theme_id, "")


__all__ = ["get_theme_prompt"]
