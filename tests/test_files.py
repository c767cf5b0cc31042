from pathlib import Path

import pytest

from texdesk.files import list_directory, read_document, write_document


def _make_tree(root: Path) -> None:
    (root / "b_dir" / "nested").mkdir(parents=True)
    (root / "a_dir").mkdir()
    (root / "a.tex").write_text("", encoding="utf-8")
    (root / "Z.bib").write_text("", encoding="utf-8")
    (root / "b_dir" / "chapter.tex").write_text("", encoding="utf-8")
    (root / "b_dir" / "nested" / "deep.tex").write_text("", encoding="utf-8")


def test_read_and_write_document(tmp_path: Path) -> None:
    path = tmp_path / "doc.tex"
    write_document(path, "\\section{Ünïcode}")
    assert read_document(path) == "\\section{Ünïcode}"


def test_list_directory_puts_directories_first_then_sorts_by_name(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    entries = list_directory(tmp_path)

    assert [(entry.name, entry.is_dir) for entry in entries] == [
        ("a_dir", True),
        ("b_dir", True),
        ("Z.bib", False),
        ("a.tex", False),
    ]
    assert all(entry.children == [] for entry in entries)


def test_list_directory_depth_limits_recursion(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    entries = list_directory(tmp_path, depth=2)
    b_dir = entries[1]

    assert [child.name for child in b_dir.children] == ["nested", "chapter.tex"]
    assert b_dir.children[0].children == []


def test_list_directory_without_depth_recurses_fully(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    nested = list_directory(tmp_path, depth=None)[1].children[0]

    assert [child.name for child in nested.children] == ["deep.tex"]


def test_list_directory_rejects_files_and_bad_depth(tmp_path: Path) -> None:
    file_path = tmp_path / "doc.tex"
    file_path.write_text("", encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        list_directory(file_path)

    with pytest.raises(ValueError):
        list_directory(tmp_path, depth=0)
