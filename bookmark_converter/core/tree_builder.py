"""
Bookmark tree builder.

This module turns the decoded JSON of a Chromium-family ``Bookmarks`` file
into a tree of Folder and Link objects. The document layout is:

    {"checksum": "...", "roots": {"bookmark_bar": {...}, "other": {...}}, ...}

Every node under ``roots`` is an object with a ``type`` tag ("folder" or
"url"). An object without a tag is read as a folder when it has a
``name``, and otherwise as a container of named entries (Opera keeps its
speed dial, trash and user folders under such a ``custom_root``). The
first malformed node aborts the whole parse with a ParseError carrying the
slash-separated path of keys leading to it.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Union

from bookmark_converter.core.data_models import Folder, Link, Tree
from bookmark_converter.core.scalar_readers import (
    read_string,
    read_timestamp,
)
from bookmark_converter.utils.error_handler import (
    ChildrenNotArrayError,
    FieldError,
    InvalidRootTypeError,
    KeyNotFoundError,
    ParseError,
    StructuralError,
    TypeTagNotStringError,
    UnexpectedNodeTypeError,
    UnknownTypeError,
)

ROOTS_KEY = "roots"


@contextmanager
def _node_path(key: str) -> Iterator[None]:
    """Qualify any error raised while building the node at ``key``."""
    try:
        yield
    except ParseError as e:
        e.path.insert(0, key)
        raise
    except (FieldError, StructuralError) as e:
        raise ParseError(e, [key]) from e


class BookmarkTreeBuilder:
    """
    Builder for bookmark trees.

    Walks the generic JSON mapping recursively, checking the type of every
    field it reads.
    """

    def __init__(self):
        """Initialize the tree builder."""
        self.logger = logging.getLogger(__name__)

    def parse(self, document: Any) -> Tree:
        """
        Build a tree from a whole bookmarks document.

        Args:
            document: Decoded JSON of the bookmarks file

        Returns:
            Tree rooted at the synthetic "roots" folder

        Raises:
            ParseError: If the document is malformed anywhere
        """
        if not isinstance(document, dict) or ROOTS_KEY not in document:
            raise ParseError(InvalidRootTypeError())

        root = self.build_tree(ROOTS_KEY, document[ROOTS_KEY])

        folder_count, link_count = root.count()
        self.logger.info(
            f"Built bookmark tree: {folder_count} folders, {link_count} links"
        )
        return Tree(root)

    def build_tree(self, key: str, item: Any) -> Folder:
        """
        Build the synthetic root folder from the ``roots`` mapping.

        Every named entry of the mapping becomes a top-level folder, in
        key order.
        """
        if not isinstance(item, dict):
            raise ParseError(InvalidRootTypeError())

        with _node_path(key):
            return self._make_container(key, item)

    def _make_container(self, key: str, data: Dict[str, Any]) -> Folder:
        """
        Build a folder whose entries are named nodes rather than a
        ``children`` array, such as ``roots`` or Opera's ``custom_root``.

        The folder is named after its key and has no timestamps.
        """
        links: List[Link] = []
        folders: List[Folder] = []

        for child_key, child in data.items():
            self._add(child_key, child, links, folders)

        return Folder(name=key, key=key, links=tuple(links), folders=tuple(folders))

    def _add(
        self,
        key: str,
        item: Any,
        links: List[Link],
        folders: List[Folder],
    ) -> None:
        """Build the node at ``key`` and append it to the matching list."""
        node = self._build_node(key, item)

        if isinstance(node, Link):
            links.append(node)
        else:
            folders.append(node)

    def _build_node(self, key: str, item: Any) -> Union[Folder, Link]:
        """Dispatch on the node's ``type`` tag."""
        with _node_path(key):
            if not isinstance(item, dict):
                raise UnexpectedNodeTypeError(key)

            if "type" not in item:
                # Untyped: a folder if it has a name, else a container
                if "name" in item:
                    return self._make_folder(key, item)
                return self._make_container(key, item)

            tag = item["type"]
            if not isinstance(tag, str):
                raise TypeTagNotStringError(key)

            if tag == "folder":
                return self._make_folder(key, item)
            if tag == "url":
                return self._make_link(key, item)

            raise UnknownTypeError(key, tag)

    def _read_common(self, key: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Read the fields shared by folders and links."""
        fields = {
            "key": key,
            "name": read_string("name", data),
            "added": read_timestamp("date_added", data),
        }

        try:
            fields["modified"] = read_timestamp("date_modified", data)
        except KeyNotFoundError:
            fields["modified"] = None

        return fields

    def _make_link(self, key: str, data: Dict[str, Any]) -> Link:
        fields = self._read_common(key, data)
        return Link(url=read_string("url", data), **fields)

    def _make_folder(self, key: str, data: Dict[str, Any]) -> Folder:
        fields = self._read_common(key, data)
        links: List[Link] = []
        folders: List[Folder] = []

        if "children" in data:
            children = data["children"]
            if not isinstance(children, list):
                raise ChildrenNotArrayError(key)

            for index, child in enumerate(children):
                self._add(f"#{index}", child, links, folders)

        self.logger.debug(
            f"Folder {fields['name']!r}: {len(links)} links, {len(folders)} folders"
        )
        return Folder(links=tuple(links), folders=tuple(folders), **fields)


def build_tree(key: str, item: Any) -> Folder:
    """Build a root folder named ``key`` from a mapping of named folders."""
    return BookmarkTreeBuilder().build_tree(key, item)


def parse(document: Any) -> Tree:
    """Build a bookmark tree from a decoded bookmarks document."""
    return BookmarkTreeBuilder().parse(document)
