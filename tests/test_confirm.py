"""
Tests for the optional full-content confirmation of groups.
"""
import logging

import confirm
from conftest import paths_of
import traversal
from scanconfig import ScanConfig


def test_nothing_to_confirm():
    assert confirm.confirm(None) == (None, [])


def test_true_duplicates_survive(tree):
    index, _ = traversal.scan(ScanConfig(root_path=str(tree), recursive=True))
    groups, diagnostics = confirm.confirm(index.report())
    assert paths_of(groups) == paths_of(index.report())
    assert diagnostics == []


def test_collision_is_removed(tmp_path, colliding_pair):
    a, b = colliding_pair
    (tmp_path / "one").write_bytes(a)
    (tmp_path / "two").write_bytes(b)
    index, _ = traversal.scan(ScanConfig(root_path=str(tmp_path)))
    assert index.report() is not None

    groups, diagnostics = confirm.confirm(index.report())
    assert groups is None
    assert diagnostics == []


def test_collision_group_is_split(tmp_path, colliding_pair):
    a, b = colliding_pair
    for name, data in (("a1", a), ("a2", a), ("b1", b), ("b2", b), ("b3", b)):
        (tmp_path / name).write_bytes(data)
    index, _ = traversal.scan(ScanConfig(root_path=str(tmp_path)))
    assert len(index.report()) == 1

    groups, _ = confirm.confirm(index.report())
    assert paths_of(groups) == {
        frozenset([str(tmp_path / "a1"), str(tmp_path / "a2")]),
        frozenset([str(tmp_path / "b1"), str(tmp_path / "b2"), str(tmp_path / "b3")]),
        }
    assert {g.fingerprint for g in groups} == {index.report()[0].fingerprint}


def test_vanished_file_is_dropped(tmp_path):
    for name in ("x", "y", "z"):
        (tmp_path / name).write_text("same")
    index, _ = traversal.scan(ScanConfig(root_path=str(tmp_path)))
    (tmp_path / "z").unlink()

    groups, diagnostics = confirm.confirm(index.report())
    assert paths_of(groups) == {frozenset([str(tmp_path / "x"), str(tmp_path / "y")])}
    assert [d.path for d in diagnostics] == [str(tmp_path / "z")]
    assert diagnostics[0].level == logging.ERROR
    assert isinstance(diagnostics[0].error, FileNotFoundError)


def test_full_hash_reads_everything(tmp_path):
    head = b"x" * confirm.HASHBLOCK
    (tmp_path / "one").write_bytes(head + b"1")
    (tmp_path / "two").write_bytes(head + b"2")
    assert confirm.full_hash(str(tmp_path / "one")) != confirm.full_hash(str(tmp_path / "two"))


def test_vanished_file_is_emitted(tmp_path):
    for name in ("x", "y"):
        (tmp_path / name).write_text("same")
    index, _ = traversal.scan(ScanConfig(root_path=str(tmp_path)))
    (tmp_path / "y").unlink()

    emitted = []
    groups, diagnostics = confirm.confirm(index.report(), emit=emitted.append)
    assert groups is None
    assert emitted == diagnostics
    assert [d.path for d in emitted] == [str(tmp_path / "y")]
