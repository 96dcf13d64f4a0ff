"""
Pytest configuration and fixtures
"""

import pytest

import fingerprint


@pytest.fixture
def tree(tmp_path):
    """
    root/
        a.txt       hello
        b.txt       hello
        c.txt       world
        empty.txt   (nothing)
        sub/
            d.txt   hello
    """
    (tmp_path / "a.txt").write_text("hello")
    (tmp_path / "b.txt").write_text("hello")
    (tmp_path / "c.txt").write_text("world")
    (tmp_path / "empty.txt").write_text("")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "d.txt").write_text("hello")
    return tmp_path


@pytest.fixture(scope="session")
def colliding_pair():
    """
    Two different three byte strings with the same CRC-16. There are
    65536 fingerprints, so 65537 distinct inputs must contain a pair.
    """
    seen = {}
    for i in range(1 << 16 | 1):
        data = i.to_bytes(3, "big")
        fp = fingerprint.crc16_usb(data)
        if fp in seen:
            return seen[fp], data
        seen[fp] = data
    raise AssertionError("pigeonhole principle failed")


def paths_of(groups):
    """The groups as a set of frozensets of paths, ignoring order."""
    if groups is None:
        return set()
    return {frozenset(g.paths) for g in groups}
