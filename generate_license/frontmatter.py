"""Reading license templates and their YAML front-matter."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, Tuple

import yaml

from .errors import TemplateError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".tmpl"
FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


@dataclass(frozen=True)
class TemplateFile:
    path: Path
    relative_path: str
    data: Dict[str, Any] = field(default_factory=dict)
    body: str = ""

    @property
    def stem(self) -> str:
        return self.path.stem

    @property
    def dirname(self) -> Path:
        return self.path.parent


def parse_front_matter(text: str, source: str = "<string>") -> Tuple[Dict[str, Any], str]:
    """Split ``text`` into its front-matter mapping and the remaining body.

    Text without a leading ``---`` block has no data and is returned whole.
    """
    match = FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise TemplateError(f"Invalid front-matter in {source}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TemplateError(f"Front-matter in {source} must be a mapping, got {type(data).__name__}")
    return data, text[match.end():]


def load_template_file(path: Path, base_dir: Path) -> TemplateFile:
    path = Path(path).resolve()
    text = path.read_text(encoding="utf-8")
    data, body = parse_front_matter(text, source=str(path))
    try:
        relative = path.relative_to(Path(base_dir).resolve()).as_posix()
    except ValueError as exc:
        raise TemplateError(f"Template {path} is outside the template directory {base_dir}") from exc
    return TemplateFile(path=path, relative_path=relative, data=data, body=body)


def discover_templates(base_dir: Path, pattern: str = "*" + TEMPLATE_SUFFIX) -> Iterator[TemplateFile]:
    """Lazily load every template under ``base_dir`` matching ``pattern``.

    Files are visited in sorted order so repeated scans see the same sequence.
    """
    base = Path(base_dir)
    if not base.is_dir():
        raise FileNotFoundError(f"Template directory not found: {base}")
    for path in sorted(base.glob(pattern)):
        if not path.is_file():
            continue
        logger.debug("Reading template %s", path)
        yield load_template_file(path, base)
