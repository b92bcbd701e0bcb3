"""Tests for license rendering and the write pipeline."""

import pytest

from generate_license.errors import GenerateLicenseError, TemplateError
from generate_license.frontmatter import load_template_file
from generate_license.render import OutputFile, WritePipeline, license_pipeline, render_license, strip_template_suffix
from generate_license.tasks import TEMPLATES_DIR

CONTEXT = {
    "year": "2024",
    "author": "Jane Doe",
    "email": "",
}


def test_template_files_are_renamed_to_license(tmp_path):
    file = OutputFile(basename="apache-2.0.tmpl", contents="text\n")

    (written,) = license_pipeline().write([file], tmp_path / "docs")

    assert written == tmp_path / "docs" / "LICENSE"
    assert written.read_text(encoding="utf-8") == "text\n"


def test_other_files_keep_their_name(tmp_path):
    (written,) = license_pipeline().write([OutputFile(basename="tasks.py", contents="")], tmp_path)

    assert written.name == "tasks.py"


def test_existing_file_is_not_overwritten_without_force(tmp_path):
    (tmp_path / "LICENSE").write_text("original", encoding="utf-8")

    with pytest.raises(GenerateLicenseError, match="Refusing to overwrite"):
        license_pipeline().write([OutputFile(basename="mit.tmpl", contents="new")], tmp_path)

    assert (tmp_path / "LICENSE").read_text(encoding="utf-8") == "original"


def test_force_overwrites(tmp_path):
    (tmp_path / "LICENSE").write_text("original", encoding="utf-8")

    license_pipeline().write([OutputFile(basename="mit.tmpl", contents="new")], tmp_path, force=True)

    assert (tmp_path / "LICENSE").read_text(encoding="utf-8") == "new"


def test_hooks_run_in_registration_order():
    seen = []
    pipeline = WritePipeline()
    pipeline.pre_write(r"\.tmpl$", lambda f: seen.append("first"))
    pipeline.pre_write(r"^mit", lambda f: seen.append("second"))

    pipeline.apply(OutputFile(basename="mit.tmpl", contents=""))

    assert seen == ["first", "second"]


def test_strip_template_suffix():
    assert strip_template_suffix("choices.py.tmpl") == "choices.py"
    assert strip_template_suffix("README.md") == "README.md"


def test_render_bundled_mit_license():
    template = load_template_file(TEMPLATES_DIR / "mit.tmpl", TEMPLATES_DIR)

    text = render_license(template, CONTEXT)

    assert text.startswith("MIT License\n\nCopyright (c) 2024 Jane Doe\n\nPermission is hereby granted")
    assert text.endswith("SOFTWARE.\n")


def test_render_includes_email_when_given():
    template = load_template_file(TEMPLATES_DIR / "isc.tmpl", TEMPLATES_DIR)

    text = render_license(template, dict(CONTEXT, email="jane@example.com"))

    assert "Copyright (c) 2024 Jane Doe <jane@example.com>\n" in text


def test_render_with_missing_value_fails(templates_dir, write_template):
    path = write_template("mit.tmpl", "spdx-id: MIT\ntitle: MIT License\n", "{{ holder }}\n")
    template = load_template_file(path, templates_dir)

    with pytest.raises(TemplateError, match="holder"):
        render_license(template, CONTEXT)


def test_render_bundled_apache_license_appendix():
    template = load_template_file(TEMPLATES_DIR / "apache-2.0.tmpl", TEMPLATES_DIR)

    text = render_license(template, CONTEXT)

    assert text.lstrip().startswith("Apache License\n")
    assert "   Copyright 2024 Jane Doe\n\n   Licensed under the Apache License" in text
    assert "{{" not in text
