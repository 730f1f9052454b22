"""
Data models for the Bookmark Converter.

The bookmark tree is built once by the tree builder and is not modified
afterwards, so every node is a frozen dataclass holding tuples of children.
"""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class Node:
    """
    Data common to folders and links.

    Attributes:
        name: Display name
        key: Field key in the source object, or "#<index>" inside a
            "children" array
        added: Creation time (None only for the synthetic root)
        modified: Last modification time, if recorded
    """

    name: str
    key: str
    added: Optional[datetime] = None
    modified: Optional[datetime] = None


@dataclass(frozen=True)
class Link(Node):
    """A single bookmark."""

    url: str = ""


@dataclass(frozen=True)
class Folder(Node):
    """A bookmark folder owning its links and sub-folders in source order."""

    links: Tuple[Link, ...] = ()
    folders: Tuple["Folder", ...] = ()

    def is_empty(self) -> bool:
        return not self.links and not self.folders

    def count(self) -> Tuple[int, int]:
        """Return the number of folders and links below this folder."""
        folder_count = len(self.folders)
        link_count = len(self.links)

        for child in self.folders:
            child_folders, child_links = child.count()
            folder_count += child_folders
            link_count += child_links

        return folder_count, link_count


@dataclass(frozen=True)
class Tree:
    """A parsed bookmark store: one synthetic root folder."""

    root: Folder

    @property
    def folders(self) -> Tuple[Folder, ...]:
        """The named top-level folders (bookmarks bar, other bookmarks, ...)."""
        return self.root.folders

    def count(self) -> Tuple[int, int]:
        return self.root.count()


def _quote(text: str) -> str:
    """Double-quote text so that quotes and newlines stay on one line."""
    return json.dumps(text, ensure_ascii=False)


def dump_tree(folder: Folder, level: int = 0) -> Iterator[str]:
    """
    Yield an indented, one-line-per-node listing of a folder.

    Used by the ``--dump-tree`` command line option.
    """
    indent = " " * level
    yield f"{indent}({level}) Folder[{_quote(folder.key)}]: {_quote(folder.name)}"

    level += 1
    indent = " " * level
    for link in folder.links:
        added = link.added.isoformat() if link.added else "-"
        yield (
            f"{indent}({level}) Link[{_quote(link.key)}]: {_quote(link.name)} "
            f"(added {added})"
        )

    for child in folder.folders:
        yield from dump_tree(child, level)
