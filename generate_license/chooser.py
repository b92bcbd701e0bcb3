"""Interactive license picker."""
from __future__ import annotations

import logging
import re
from typing import Callable, Mapping, Optional, Sequence

import questionary

from .errors import ChoiceError, PromptCancelled

logger = logging.getLogger(__name__)

Choice = Mapping[str, str]
AskChoice = Callable[[str, Sequence[Choice]], Optional[str]]

DEFAULT_MESSAGE = "Choose the license to generate"


def choice_filter(text: str, choice: Choice) -> bool:
    """Case-insensitive regex match of ``text`` against a choice's name or id."""
    try:
        pattern = re.compile(text, re.IGNORECASE)
    except re.error:
        pattern = re.compile(re.escape(text), re.IGNORECASE)
    return bool(pattern.search(choice["name"]) or pattern.search(choice["id"]))


def ask_select(message: str, choices: Sequence[Choice]) -> Optional[str]:
    options = [questionary.Choice(title=f"{c['name']} ({c['id']})", value=c["id"]) for c in choices]
    return questionary.select(message, choices=options).ask()


def choose(
    choices: Sequence[Choice],
    message: str = DEFAULT_MESSAGE,
    query: Optional[str] = None,
    ask: Optional[AskChoice] = None,
    interactive: bool = True,
) -> str:
    """Pick one license id out of ``choices``.

    Without ``interactive`` the ``query`` must narrow the list to exactly one
    choice, since there is nobody to ask.
    """
    candidates = list(choices)
    if query:
        candidates = [choice for choice in candidates if choice_filter(query, choice)]
        if not candidates:
            raise ChoiceError(f"No license matches '{query}'. Use --list to see supported identifiers.")
    if not interactive:
        if len(candidates) != 1:
            raise ChoiceError("No license specified. Use --list to see available options.")
        return candidates[0]["id"]
    answer = (ask or ask_select)(message, candidates)
    if answer is None:
        raise PromptCancelled("License selection cancelled.")
    logger.debug("Selected license %s", answer)
    return answer
