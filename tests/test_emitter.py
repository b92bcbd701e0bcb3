"""Tests for sorting records and writing generated support modules."""

import pytest

from generate_license.emitter import finalize, generate, sort_records
from generate_license.errors import DuplicateTemplateError, TemplateError
from generate_license.frontmatter import discover_templates
from generate_license.scanner import TaskRecord, load_support_template, scan
from generate_license.tasks import GENERATED_DIR, SUPPORT_DIR, TEMPLATES_DIR


def record(name, description, relative=None):
    return TaskRecord(alias="license", name=name, description=description, relative=relative or f"{name}.tmpl")


def test_sort_is_case_sensitive_code_point_order():
    records = [record("zlib", "zlib License"), record("mit", "MIT License"), record("bsl", "Boost"), record("bsd", "BSD")]

    assert [r.description for r in sort_records(records)] == ["BSD", "Boost", "MIT License", "zlib License"]


def test_sort_keeps_ties_in_scan_order():
    records = [record("b", "Same"), record("a", "Same"), record("c", "Other")]

    assert [r.name for r in sort_records(records)] == ["c", "b", "a"]


def test_finalize_binds_sorted_tasks(templates_dir, sample_templates, support_template):
    document = finalize(scan(discover_templates(templates_dir), support_template))

    assert document.filename == "tasks.py"
    assert [task["name"] for task in document.render_data["tasks"]] == ["apache-2.0", "isc", "mit"]
    assert document.contents == (
        "TASKS = [\n"
        '    ("apache-2.0", "Apache License 2.0", []),\n'
        '    ("isc", "ISC License", []),\n'
        '    ("mit", "MIT License", ["defaults"]),\n'
        "]\n"
    )


def test_finalize_accepts_explicit_template(support_template):
    document = finalize([record("mit", "MIT License")], load_support_template(support_template))

    assert '("mit", "MIT License", [])' in document.contents


def test_duplicate_spdx_ids_are_rejected(templates_dir, write_template, support_template):
    write_template("mit.tmpl", "spdx-id: MIT\ntitle: MIT License\n")
    write_template("mit-copy.tmpl", "spdx-id: mit\ntitle: Expat License\n")

    with pytest.raises(DuplicateTemplateError, match="mit-copy.tmpl"):
        finalize(scan(discover_templates(templates_dir), support_template))


def test_generate_writes_one_file_named_after_template(tmp_path, templates_dir, sample_templates, support_template):
    dest = tmp_path / "out"

    written = generate(templates_dir, support_template, dest)

    assert written == dest / "tasks.py"
    assert list(dest.iterdir()) == [written]


def test_regeneration_is_idempotent(tmp_path, templates_dir, sample_templates, support_template):
    dest = tmp_path / "out"

    first = generate(templates_dir, support_template, dest).read_bytes()
    second = generate(templates_dir, support_template, dest).read_bytes()

    assert first == second


def test_missing_field_leaves_no_output(tmp_path, templates_dir, sample_templates, write_template, support_template):
    write_template("zz-broken.tmpl", "title: Broken\n")
    dest = tmp_path / "out"

    with pytest.raises(TemplateError):
        generate(templates_dir, support_template, dest)

    assert not (dest / "tasks.py").exists()


@pytest.mark.parametrize("support_name", ["tasks.py.tmpl", "choices.py.tmpl"])
def test_bundled_modules_match_regenerated_output(tmp_path, support_name):
    written = generate(TEMPLATES_DIR, SUPPORT_DIR / support_name, tmp_path, generators_dir=GENERATED_DIR)

    committed = GENERATED_DIR / written.name
    assert written.read_text(encoding="utf-8") == committed.read_text(encoding="utf-8")
