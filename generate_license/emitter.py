"""Render collected task records into a generated support module."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .errors import DuplicateTemplateError
from .frontmatter import TEMPLATE_SUFFIX, discover_templates
from .render import OutputFile, WritePipeline, render_text, strip_template_suffix
from .scanner import Description, SupportTemplate, TaskRecord, scan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputDocument:
    template_path: Path
    filename: str
    render_data: Dict[str, Any]
    contents: str


def compare_descriptions(a: TaskRecord, b: TaskRecord) -> int:
    if a.description > b.description:
        return 1
    if a.description < b.description:
        return -1
    return 0


def sort_records(records: Iterable[TaskRecord]) -> List[TaskRecord]:
    return sorted(records, key=cmp_to_key(compare_descriptions))


def check_unique(records: Iterable[TaskRecord]) -> None:
    seen: Dict[str, TaskRecord] = {}
    for record in records:
        previous = seen.get(record.name)
        if previous is not None:
            raise DuplicateTemplateError(
                f"SPDX id '{record.name}' is declared by both {previous.relative} and {record.relative}"
            )
        seen[record.name] = record


def finalize(records: Iterable[TaskRecord], template: Optional[SupportTemplate] = None) -> OutputDocument:
    """Sort every record by description and render the support template.

    ``records`` is drained completely before rendering. When ``template`` is
    omitted it is taken from the ``TaskStream`` returned by ``scan``.
    """
    if template is None:
        template = records.template  # type: ignore[attr-defined]
    ordered = sort_records(records)
    check_unique(ordered)
    data = {"tasks": [record.as_dict() for record in ordered]}
    contents = render_text(template.source, data, name=str(template.path))
    logger.debug("Rendered %s with %d tasks", template.filename, len(ordered))
    return OutputDocument(
        template_path=template.path,
        filename=strip_template_suffix(template.filename),
        render_data=data,
        contents=contents,
    )


def write_output(
    document: OutputDocument,
    dest: Union[str, Path],
    pipeline: Optional[WritePipeline] = None,
) -> Path:
    pipeline = pipeline or WritePipeline()
    file = OutputFile(basename=document.filename, contents=document.contents, source=document.template_path)
    (written,) = pipeline.write([file], Path(dest), force=True)
    return written


def generate(
    templates_dir: Union[str, Path],
    template_path: Union[str, Path],
    dest: Union[str, Path],
    pattern: str = "*" + TEMPLATE_SUFFIX,
    generators_dir: Optional[Path] = None,
    description: Optional[Description] = None,
    pipeline: Optional[WritePipeline] = None,
) -> Path:
    """Scan ``templates_dir`` and write the rendered support module into ``dest``."""
    stream = scan(
        discover_templates(Path(templates_dir), pattern),
        template_path,
        description=description,
        generators_dir=generators_dir or Path(dest),
    )
    document = finalize(stream)
    return write_output(document, dest, pipeline)
