"""Whole-file reads and writes plus directory listing for the editor."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class DirectoryEntry(BaseModel):
    """A file or directory; children are filled only when listed deeply enough."""

    name: str
    path: Path
    is_dir: bool
    children: list[DirectoryEntry] = Field(default_factory=list)


def read_document(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_document(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")


def _sort_key(path: Path) -> tuple[bool, str]:
    return (not path.is_dir(), path.name)


def list_directory(root: Path, depth: int | None = 1) -> list[DirectoryEntry]:
    """List root's entries, directories first and then by name.

    depth=1 lists only the immediate entries, larger values descend that many
    levels, and None descends without limit.
    """

    if depth is not None and depth < 1:
        raise ValueError("depth must be >= 1 or None")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    next_depth = None if depth is None else depth - 1
    entries: list[DirectoryEntry] = []
    for path in sorted(root.iterdir(), key=_sort_key):
        is_dir = path.is_dir()
        children: list[DirectoryEntry] = []
        if is_dir and (next_depth is None or next_depth > 0):
            children = list_directory(path, next_depth)
        entries.append(DirectoryEntry(name=path.name, path=path, is_dir=is_dir, children=children))

    return entries
