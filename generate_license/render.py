"""Template rendering and the write pipeline."""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

from jinja2 import Environment, StrictUndefined, TemplateError as JinjaTemplateError

from .errors import GenerateLicenseError, TemplateError
from .frontmatter import TEMPLATE_SUFFIX, TemplateFile

logger = logging.getLogger(__name__)

LICENSE_BASENAME = "LICENSE"


def literal(value: Any) -> str:
    """Render ``value`` as a Python literal (strings and lists of strings)."""
    return json.dumps(value, ensure_ascii=False)


def create_environment() -> Environment:
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["literal"] = literal
    return env


def render_text(source: str, data: Mapping[str, Any], name: str = "<template>") -> str:
    env = create_environment()
    try:
        return env.from_string(source).render(**data)
    except JinjaTemplateError as exc:
        raise TemplateError(f"Failed to render {name}: {exc}") from exc


def render_license(template: TemplateFile, context: Mapping[str, Any]) -> str:
    logger.debug("Rendering license template %s", template.path)
    text = render_text(template.body, context, name=str(template.path))
    text = text.lstrip("\n")
    if not text.endswith("\n"):
        text += "\n"
    return text


@dataclass
class OutputFile:
    basename: str
    contents: str
    source: Optional[Path] = None


Middleware = Callable[[OutputFile], None]


def rename_to_license(file: OutputFile) -> None:
    file.basename = LICENSE_BASENAME


@dataclass
class WritePipeline:
    hooks: List[Tuple[re.Pattern, Middleware]] = field(default_factory=list)

    def pre_write(self, pattern: Union[str, re.Pattern], middleware: Middleware) -> None:
        self.hooks.append((re.compile(pattern), middleware))

    def apply(self, file: OutputFile) -> OutputFile:
        for pattern, middleware in self.hooks:
            if pattern.search(file.basename):
                middleware(file)
        return file

    def write(self, files: Sequence[OutputFile], dest: Path, force: bool = False) -> List[Path]:
        """Run the pre-write hooks over ``files`` and write them into ``dest``.

        All target paths are checked before anything is written, so a refusal
        leaves the destination untouched.
        """
        dest = Path(dest).expanduser()
        targets = []
        for file in files:
            self.apply(file)
            target = dest / file.basename
            if target.exists() and not force:
                raise GenerateLicenseError(
                    f"Refusing to overwrite existing file: {target}. Use --force to override."
                )
            targets.append((target, file))
        dest.mkdir(parents=True, exist_ok=True)
        written = []
        for target, file in targets:
            target.write_text(file.contents, encoding="utf-8")
            logger.info("Wrote %s", target)
            written.append(target)
        return written


def strip_template_suffix(name: str) -> str:
    if name.endswith(TEMPLATE_SUFFIX):
        return name[: -len(TEMPLATE_SUFFIX)]
    return name


def license_pipeline() -> WritePipeline:
    pipeline = WritePipeline()
    pipeline.pre_write(re.escape(TEMPLATE_SUFFIX) + "$", rename_to_license)
    return pipeline
