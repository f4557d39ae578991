"""Tests for the console demonstration."""

import io

from preordertree.__main__ import build_sample_tree, main


def test_demo_prints_pre_order_and_waits(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["1", "2", "3", "4", "5", "6", "7",
                     "End of tree traversal. Type any key to exit."]


def test_demo_exits_cleanly_without_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main() == 0
    assert capsys.readouterr().out.endswith("Type any key to exit.\n")


def test_sample_tree_shape():
    root = build_sample_tree()
    assert [child.value for child in root.children] == [2, 5]
    assert [child.value for child in root.children[0].children] == [3, 4]
    assert [child.value for child in root.children[1].children] == [6, 7]
