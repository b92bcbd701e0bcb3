import textwrap
from pathlib import Path

import pytest

from generate_license import context


@pytest.fixture(autouse=True)
def isolated_identity(monkeypatch):
    """Keep the developer's git identity out of rendered licenses."""
    for name in ("GIT_AUTHOR_NAME", "AUTHOR", "FULLNAME", "NAME", "USER", "USERNAME",
                 "GIT_AUTHOR_EMAIL", "EMAIL", "AUTHOR_EMAIL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(context, "read_git_config", lambda key: "")


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    path = tmp_path / "templates"
    path.mkdir()
    return path


@pytest.fixture
def write_template(templates_dir: Path):
    def write(filename: str, front_matter: str, body: str = "Licensed.\n") -> Path:
        path = templates_dir / filename
        path.write_text("---\n" + textwrap.dedent(front_matter) + "---\n" + body, encoding="utf-8")
        return path

    return write


@pytest.fixture
def support_template(tmp_path: Path) -> Path:
    path = tmp_path / "support" / "tasks.py.tmpl"
    path.parent.mkdir()
    path.write_text(
        textwrap.dedent("""\
            TASKS = [
            {% for task in tasks %}
                ({{ task.name | literal }}, {{ task.description | literal }}, {{ task.deps | literal }}),
            {% endfor %}
            ]
        """),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_templates(write_template):
    write_template("mit.tmpl", """\
        spdx-id: MIT
        title: MIT License
        deps:
          - defaults
    """, "Copyright (c) {{ year }} {{ author }}\n")
    write_template("isc.tmpl", """\
        spdx-id: ISC
        title: ISC License
    """, "ISC {{ year }} {{ author }}\n")
    write_template("apache-2.0.tmpl", """\
        spdx-id: Apache-2.0
        title: Apache License 2.0
    """)
