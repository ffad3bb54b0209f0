"""Tests for the command-line converter (scripts/convert_file.py)."""

import os

from conftest import RM_HEADERS, RM_ROW, build_xlsx
from scripts.convert_file import collect_files, main


def test_collect_files_filters_extensions(tmp_path):
    (tmp_path / "RM_items.xlsx").write_bytes(b"")
    (tmp_path / "notes.pdf").write_bytes(b"")
    (tmp_path / "PE0101.csv").write_bytes(b"")

    files = collect_files([str(tmp_path), str(tmp_path / "missing.xlsx")])
    assert [path.name for path in files] == ["PE0101.csv", "RM_items.xlsx"]


def test_main_converts_directory(tmp_path, capsys):
    inbox = tmp_path / "inbox"
    inbox.mkdir()
    (inbox / "RM_items.xlsx").write_bytes(build_xlsx([RM_HEADERS, RM_ROW]))
    # Unrecognizable headers: the RM prefix decides the type
    (inbox / "RM_odd.xlsx").write_bytes(build_xlsx([["Part Number", "Description", "Misc"], ["rm-1", "Bolt", 1]]))

    out_dir = tmp_path / "out"
    exit_code = main(
        [str(inbox), "--output-dir", str(out_dir), "--error-report-dir", str(tmp_path / "errors")]
    )

    assert exit_code == 0
    assert os.path.exists(out_dir / "RM_items.txt")
    assert os.path.exists(tmp_path / "errors" / "RM_odd-errors.json")
    printed = capsys.readouterr().out
    assert "completed" in printed
    assert "completed_with_errors" in printed


def test_main_reports_failure_for_unknown_prefix(tmp_path):
    path = tmp_path / "ZZ_odd.xlsx"
    path.write_bytes(build_xlsx([["Alpha", "Beta", "Gamma"], [1, 2, 3]]))

    assert main([str(path), "--output-dir", str(tmp_path / "out")]) == 1


def test_main_without_inputs(tmp_path):
    assert main([str(tmp_path / "empty")]) == 1
