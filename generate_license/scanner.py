"""Turn license templates into task records for code generation."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Union

from .errors import TemplateError
from .frontmatter import TEMPLATE_SUFFIX, TemplateFile

logger = logging.getLogger(__name__)

ALIAS = "license"

Description = Union[str, Callable[[TemplateFile], str]]


@dataclass(frozen=True)
class TaskRecord:
    alias: str
    name: str
    description: str
    deps: List[str] = field(default_factory=list)
    path: str = ""
    relative: str = ""

    def as_dict(self) -> dict:
        return {
            "alias": self.alias,
            "name": self.name,
            "description": self.description,
            "deps": list(self.deps),
            "path": self.path,
            "relative": self.relative,
        }


@dataclass(frozen=True)
class SupportTemplate:
    path: Path
    source: str

    @property
    def filename(self) -> str:
        return self.path.name


def load_support_template(path: Union[str, Path]) -> SupportTemplate:
    path = Path(path).resolve()
    return SupportTemplate(path=path, source=path.read_text(encoding="utf-8"))


class TaskStream:
    """Lazy sequence of task records bound to the support template they feed."""

    def __init__(self, records: Iterator[TaskRecord], template: SupportTemplate):
        self._records = records
        self.template = template
        self.labels: Dict[str, str] = {}

    def __iter__(self) -> Iterator[TaskRecord]:
        return self._records


def _require_string(template: TemplateFile, key: str) -> str:
    if key not in template.data:
        raise TemplateError(f"Template {template.path} is missing required field '{key}'")
    value = template.data[key]
    if not isinstance(value, str) or not value.strip():
        raise TemplateError(f"Template {template.path} has an invalid '{key}': {value!r}")
    return value


def _optional_deps(template: TemplateFile) -> List[str]:
    deps = template.data.get("deps")
    if deps is None:
        return []
    if not isinstance(deps, list) or not all(isinstance(dep, str) for dep in deps):
        raise TemplateError(f"Template {template.path} has invalid 'deps': expected a list of task names")
    return list(deps)


def resolve_description(template: TemplateFile, description: Optional[Description]) -> str:
    """Per-file label: the option's value, or the file stem when it is unset."""
    if callable(description):
        return description(template) or template.stem
    return description or template.stem


def to_record(template: TemplateFile, generators_dir: Path) -> TaskRecord:
    spdx_id = _require_string(template, "spdx-id")
    title = _require_string(template, "title")
    name = spdx_id.lower()
    target = template.dirname / f"{name}{TEMPLATE_SUFFIX}"
    return TaskRecord(
        alias=ALIAS,
        name=name,
        description=title,
        deps=_optional_deps(template),
        path=Path(os.path.relpath(target, generators_dir)).as_posix(),
        relative=template.relative_path,
    )


def scan(
    inputs: Iterable[TemplateFile],
    template_path: Union[str, Path],
    description: Optional[Description] = None,
    generators_dir: Optional[Path] = None,
) -> TaskStream:
    """Map each template in ``inputs`` to a ``TaskRecord``.

    The support template is read up front so an unreadable path fails before
    any input is consumed. Records are produced lazily in input order; the
    first template lacking ``spdx-id`` or ``title`` raises ``TemplateError``.
    A record's description is always the template title; the ``description``
    option only sets the per-file label kept in ``TaskStream.labels``.
    """
    support = load_support_template(template_path)
    base = Path(generators_dir or Path.cwd()).resolve()

    def records() -> Iterator[TaskRecord]:
        for template in inputs:
            label = resolve_description(template, description)
            record = to_record(template, base)
            stream.labels[record.relative] = label
            logger.debug("Scanned %s as %s (%s)", template.relative_path, record.name, label)
            yield record

    stream = TaskStream(records(), support)
    return stream
