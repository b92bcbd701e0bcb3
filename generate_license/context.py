"""Project metadata used when rendering a license."""
from __future__ import annotations

import datetime as _dt
import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

import questionary

from .errors import PromptCancelled

logger = logging.getLogger(__name__)

Context = Dict[str, str]
ValueFactory = Callable[[Context], Optional[str]]
AskText = Callable[[str, str, bool], Optional[str]]


def read_git_config(key: str) -> str:
    try:
        completed = subprocess.run(
            ["git", "config", "--get", key],
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return ""
    return completed.stdout.strip()


def _first_env(*names: str) -> str:
    for name in names:
        value = os.environ.get(name, "")
        if value:
            return value
    return ""


def guess_full_name() -> str:
    name = _first_env("GIT_AUTHOR_NAME", "AUTHOR", "FULLNAME", "NAME", "USER", "USERNAME")
    return name or read_git_config("user.name")


def guess_email() -> str:
    email = _first_env("GIT_AUTHOR_EMAIL", "EMAIL", "AUTHOR_EMAIL")
    return email or read_git_config("user.email")


def default_year(_: Context) -> str:
    return str(_dt.date.today().year)


def default_author(_: Context) -> Optional[str]:
    return guess_full_name() or None


def default_email(_: Context) -> Optional[str]:
    return guess_email() or None


def ensure_value(text: Optional[str]) -> str:
    return text.strip() if text else ""


@dataclass(frozen=True)
class FieldSpec:
    key: str
    prompt: str
    default_factory: Optional[ValueFactory] = None
    optional: bool = False

    @property
    def placeholder(self) -> str:
        return "<" + self.key.replace("_", " ") + ">"


FIELDS: Sequence[FieldSpec] = (
    FieldSpec("year", "Copyright year", default_factory=default_year),
    FieldSpec("author", "Author or copyright holder", default_factory=default_author),
    FieldSpec("email", "Contact email (optional)", default_factory=default_email, optional=True),
)


def ask_text(prompt: str, default: str, optional: bool) -> Optional[str]:
    def validate(text: str):
        return bool(text.strip()) or optional or "This field is required."

    return questionary.text(f"{prompt}:", default=default, validate=validate).ask()


def collect_context(
    skip_prompts: bool,
    overrides: Optional[Context] = None,
    fields: Sequence[FieldSpec] = FIELDS,
    ask: Optional[AskText] = None,
) -> Context:
    """Fill in every field from overrides, defaults or the user.

    Overrides always win. With ``skip_prompts`` required fields without a
    default fall back to a ``<placeholder>``.
    """
    ask = ask or ask_text
    values: Context = {}
    if overrides:
        for key, value in overrides.items():
            trimmed = ensure_value(value)
            if trimmed:
                values[key] = trimmed
    for field in fields:
        if values.get(field.key):
            continue
        default = ensure_value(field.default_factory(values) if field.default_factory else "")
        fallback = default or ("" if field.optional else field.placeholder)
        if skip_prompts:
            values[field.key] = fallback
            continue
        answer = ask(field.prompt, fallback, field.optional)
        if answer is None:
            raise PromptCancelled("License generation cancelled.")
        values[field.key] = ensure_value(answer) or fallback
    logger.debug("Collected project metadata: %s", sorted(values))
    return values
