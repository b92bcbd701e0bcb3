"""Task table: named tasks with dependencies, run once per session."""
from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Set

from . import chooser, context as context_mod
from .emitter import generate
from .errors import TaskError
from .frontmatter import load_template_file
from .generated.choices import CHOICES
from .generated.tasks import TASKS
from .render import OutputFile, WritePipeline, license_pipeline, render_license
from .scanner import ALIAS

logger = logging.getLogger(__name__)

PACKAGE_NAME = __package__ or "generate_license"
PACKAGE_ROOT = Path(str(resources.files(PACKAGE_NAME)))
TEMPLATES_DIR = PACKAGE_ROOT / "templates"
SUPPORT_DIR = PACKAGE_ROOT / "support"
GENERATED_DIR = PACKAGE_ROOT / "generated"


@dataclass
class Session:
    cwd: Path = field(default_factory=Path.cwd)
    dest: Optional[Path] = None
    force: bool = False
    skip_prompts: bool = False
    overrides: context_mod.Context = field(default_factory=dict)
    query: Optional[str] = None
    templates_dir: Path = TEMPLATES_DIR
    ask_choice: Optional[chooser.AskChoice] = None
    ask_text: Optional[context_mod.AskText] = None
    context: context_mod.Context = field(default_factory=dict)
    completed: Set[str] = field(default_factory=set)

    @property
    def destination(self) -> Path:
        return Path(self.dest) if self.dest else Path(self.cwd)


Handler = Callable[["TaskTable", Session], None]


@dataclass(frozen=True)
class Task:
    name: str
    handler: Optional[Handler] = None
    deps: Sequence[str] = ()
    description: str = ""


class TaskTable:
    def __init__(self, pipeline: Optional[WritePipeline] = None):
        self.tasks: Dict[str, Task] = {}
        self.pipeline = pipeline or WritePipeline()

    def task(self, name: str, handler: Optional[Handler] = None, deps: Sequence[str] = (), description: str = "") -> Task:
        task = Task(name=name, handler=handler, deps=tuple(deps), description=description)
        self.tasks[name] = task
        return task

    def __contains__(self, name: str) -> bool:
        return self.resolve_name(name) in self.tasks

    def __getitem__(self, name: str) -> Task:
        return self.tasks[self.resolve_name(name)]

    def resolve_name(self, name: str) -> str:
        prefix = ALIAS + ":"
        if name not in self.tasks and name.startswith(prefix):
            return name[len(prefix):]
        return name

    def expand(self, pattern: str, exclude: str = "") -> List[str]:
        if not any(ch in pattern for ch in "*?["):
            return [self.resolve_name(pattern)]
        return [name for name in sorted(self.tasks) if name != exclude and fnmatch.fnmatchcase(name, pattern)]

    def run(self, name: str, session: Session) -> None:
        self._run(self.resolve_name(name), session, [])

    def _run(self, name: str, session: Session, stack: List[str]) -> None:
        if name in session.completed:
            return
        if name in stack:
            cycle = " -> ".join(stack + [name])
            raise TaskError(f"Dependency cycle detected: {cycle}")
        task = self.tasks.get(name)
        if task is None:
            raise TaskError(f"Unknown task '{name}'. Use --list to see supported identifiers.")
        for dep in task.deps:
            for dep_name in self.expand(dep, exclude=name):
                self._run(dep_name, session, stack + [name])
        if task.handler is not None:
            logger.debug("Running task %s", name)
            task.handler(self, session)
        session.completed.add(name)


def collect_defaults(table: TaskTable, session: Session) -> None:
    session.context.update(
        context_mod.collect_context(session.skip_prompts, session.overrides, ask=session.ask_text)
    )


def choose_license(table: TaskTable, session: Session) -> None:
    interactive = session.ask_choice is not None or not session.skip_prompts
    name = chooser.choose(CHOICES, query=session.query, ask=session.ask_choice, interactive=interactive)
    table.run(name, session)


def create_support_task(support_name: str) -> Handler:
    def handler(table: TaskTable, session: Session) -> None:
        generate(session.templates_dir, SUPPORT_DIR / support_name, session.cwd, pipeline=table.pipeline)

    return handler


def create_license_task(record: Mapping) -> Handler:
    def handler(table: TaskTable, session: Session) -> None:
        if not session.context:
            collect_defaults(table, session)
        template = load_template_file(GENERATED_DIR / record["path"], TEMPLATES_DIR)
        text = render_license(template, session.context)
        file = OutputFile(basename=template.path.name, contents=text, source=template.path)
        table.pipeline.write([file], session.destination, force=session.force)

    return handler


def register_tasks(records: Sequence[Mapping] = TASKS) -> TaskTable:
    table = TaskTable(license_pipeline())
    table.task("default", deps=["choose"], description="Choose a license and write it to LICENSE")
    table.task("choose", choose_license, description="Choose a license and write it to LICENSE")
    table.task("defaults", collect_defaults, description="Collect project metadata")
    table.task("create-tasks", create_support_task("tasks.py.tmpl"), description="Regenerate tasks.py")
    table.task("create-choices", create_support_task("choices.py.tmpl"), description="Regenerate choices.py")
    table.task("create", deps=["create-*"], description="Regenerate all support modules")
    for record in records:
        table.task(record["name"], create_license_task(record), deps=record["deps"] or (), description=record["description"])
    return table
