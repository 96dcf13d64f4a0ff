"""
Tests for the rendering of the report.
"""
import errno
import logging

import report
from fpindex import DuplicateGroup
from traversal import Diagnostic


def test_no_duplicates():
    assert report.render(None) == ["No duplicates found."]


def test_groups():
    groups = [
        DuplicateGroup(0x1234, ("r/a.txt", "r/b.txt")),
        DuplicateGroup(0x4321, ("r/c", "r/d", "r/e")),
        ]
    assert report.render(groups) == [
        "There are duplicate files:",
        "    r/a.txt",
        "    r/b.txt",
        "There are duplicate files:",
        "    r/c",
        "    r/d",
        "    r/e",
        ]


def test_diagnostic_names_level_and_message():
    e = PermissionError(errno.EACCES, "Permission denied", "r/locked")
    d = Diagnostic("r/locked", f"Unable to read dir `r/locked` because {e}", e, logging.ERROR)
    line = report.render_diagnostic(d)
    assert line.startswith("ERROR: ")
    assert "r/locked" in line
    assert "Permission denied" in line


def test_informational_diagnostic():
    d = Diagnostic("r/empty", "Skipping empty file r/empty")
    assert report.render_diagnostic(d) == "INFO: Skipping empty file r/empty"
