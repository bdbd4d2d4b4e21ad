# tests/test_family_tree.py

from __future__ import annotations

import pytest

from family_tree import FamilyTree, load_family_tree
from family_tree.core.exceptions import ConflictingParentError, MalformedLineError, NodeNotFoundError
from family_tree.loader import iter_lines
from family_tree.utils import mock_file_path

SAMPLE_LINES = ["Root:A,B", "A:C,D", "B:E"]


def test_render_sample_tree(sample_tree) -> None:
    assert sample_tree.render() == "Root\n  A\n    C\n    D\n  B\n    E\n"


def test_str_has_header_then_blank_line(sample_tree) -> None:
    text = str(sample_tree)
    assert text.startswith("Family Tree:\n\n")
    assert text == "Family Tree:\n\n" + sample_tree.render()


def test_empty_tree() -> None:
    tree = FamilyTree()
    assert len(tree) == 0
    assert tree.root is None
    assert tree.render() == ""
    assert str(tree) == "Family Tree:\n\n"


def test_comments_and_blanks_do_not_change_the_tree() -> None:
    noisy = ["# header", "", "Root:A,B", "   ", "  # note", "A:C,D", "", "B:E"]

    assert str(FamilyTree().add_lines(noisy)) == str(FamilyTree().add_lines(SAMPLE_LINES))


def test_container_protocol(sample_tree) -> None:
    assert len(sample_tree) == 6
    assert "E" in sample_tree
    assert "Zzz" not in sample_tree
    assert [n.name for n in sample_tree] == ["Root", "A", "B", "C", "D", "E"]


def test_find_and_get(sample_tree) -> None:
    assert sample_tree.find("D").parent is sample_tree.find("A")
    assert sample_tree.find("Zzz") is None
    assert sample_tree.get("D") is sample_tree.find("D")
    with pytest.raises(NodeNotFoundError):
        sample_tree.get("Zzz")


def test_add_lines_reports_line_numbers() -> None:
    tree = FamilyTree()
    with pytest.raises(MalformedLineError) as excinfo:
        tree.add_lines(["Root:A", "broken"])

    assert excinfo.value.lineno == 2
    assert "Root" in tree


def test_iter_lines_keeps_line_numbers() -> None:
    lines = list(iter_lines(mock_file_path("numbers.txt")))
    assert lines[0] == (1, "# integer-named tree")
    assert lines[1] == (2, "1:2,3")


def test_iter_lines_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list(iter_lines(tmp_path / "missing.txt"))


def test_load_hobbit_file() -> None:
    tree = load_family_tree(mock_file_path("hobbits.txt"))

    assert tree.root.name == "Balbo"
    assert tree.most_recent_common_ancestor("Bilbo", "Frodo").name == "Balbo"
    assert tree.most_recent_common_ancestor("Bilbo", "Lotho").name == "Mungo"
    assert "Ponto II" in tree


def test_load_with_converter() -> None:
    tree = load_family_tree(mock_file_path("numbers.txt"), int)
    assert tree.root.name == 1
    assert tree.most_recent_common_ancestor(5, 6).name == 1


def test_load_stops_at_first_bad_line() -> None:
    with pytest.raises(MalformedLineError) as excinfo:
        load_family_tree(mock_file_path("bad_lines.txt"))

    assert excinfo.value.lineno == 2


def test_load_can_skip_bad_lines() -> None:
    tree = load_family_tree(mock_file_path("bad_lines.txt"), skip_errors=True)

    assert tree.render() == "Root\n  A\n    C\n    D\n  B\n    E\n"


def test_load_conflict_surfaces(tmp_path) -> None:
    path = tmp_path / "conflict.txt"
    path.write_text("A:C\nB:C\n", encoding="utf-8")

    with pytest.raises(ConflictingParentError):
        load_family_tree(path)


def test_load_handles_bom_and_crlf(tmp_path) -> None:
    path = tmp_path / "windows.txt"
    path.write_bytes("\ufeffRoot:A\r\nA:B\r\n".encode("utf-8"))

    tree = load_family_tree(path)
    assert tree.render() == "Root\n  A\n    B\n"
