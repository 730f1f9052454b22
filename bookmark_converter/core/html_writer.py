"""
HTML Bookmark Writer

This module renders a bookmark tree as a single HTML document. The document
is assembled from small fragments (raw markup, escaped text, tags and
sequences) that write themselves straight to an output sink, so the whole
page is streamed in one pass without being built up in memory.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Protocol, Sequence

from bookmark_converter.core.data_models import Folder, Tree
from bookmark_converter.utils.error_handler import SinkError

DEFAULT_TITLE = "Bookmarks"

HTML_HEADER = """<!DOCTYPE HTML><html>
<head>
<meta charset="utf-8"/><title>{title}</title><style> ul {{ list-style-type: disc; }} </style>
</head>
"""

HTML_FOOTER = "</html>\n"


class TextSink(Protocol):
    """Anything HTML can be written to: files, sys.stdout, io.StringIO."""

    def write(self, text: str) -> int:
        ...


def escape_html(text: str) -> str:
    """
    Escape HTML special characters.

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text, safe in element content and quoted attributes
    """
    if not text:
        return ""

    text = text.replace("&", "&amp;")
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    text = text.replace('"', "&quot;")
    text = text.replace("'", "&#x27;")

    return text


# ============================================================================
# Fragments
# ============================================================================


class HTMLFragment(ABC):
    """A piece of HTML that knows how to write itself to a sink."""

    @abstractmethod
    def write_to(self, sink: TextSink) -> None:
        pass


class EmptyFragment(HTMLFragment):
    def write_to(self, sink: TextSink) -> None:
        pass


class RawText(HTMLFragment):
    """Markup written verbatim. Never use it for bookmark data."""

    def __init__(self, text: str):
        self.text = text

    def write_to(self, sink: TextSink) -> None:
        sink.write(self.text)


class EscapedText(RawText):
    """User-controlled text, escaped on construction."""

    def __init__(self, text: str):
        super().__init__(escape_html(text))


class FragmentList(HTMLFragment):
    """Fragments written one after another."""

    def __init__(self, fragments: Iterable[HTMLFragment]):
        self.fragments: List[HTMLFragment] = list(fragments)

    def write_to(self, sink: TextSink) -> None:
        for fragment in self.fragments:
            fragment.write_to(sink)


class Tag(HTMLFragment):
    """An element without attributes wrapping a body fragment."""

    def __init__(self, name: str, body: HTMLFragment):
        self.name = name
        self.body = body

    def write_to(self, sink: TextSink) -> None:
        sink.write(f"<{self.name}>")
        self.body.write_to(sink)
        sink.write(f"</{self.name}>")


EMPTY = EmptyFragment()


def html_raw(text: str) -> HTMLFragment:
    return RawText(text)


def html_text(text: str) -> HTMLFragment:
    return EscapedText(text)


def html_tag(name: str, body: HTMLFragment) -> HTMLFragment:
    return Tag(name, body)


def html_sequence(*fragments: HTMLFragment) -> HTMLFragment:
    return FragmentList(fragments)


def html_link(url: str, text: str) -> HTMLFragment:
    return RawText(f'<a href="{escape_html(url)}">{escape_html(text)}</a>')


# ============================================================================
# Bookmark layout
# ============================================================================


def folder_name(folder: Folder) -> HTMLFragment:
    return html_tag("h4", html_text(folder.name))


def folder_links(folder: Folder) -> HTMLFragment:
    """A definition list with one entry per link, or nothing."""
    if not folder.links:
        return EMPTY

    return html_tag(
        "dl",
        FragmentList(
            html_tag("dt", html_link(link.url, link.name)) for link in folder.links
        ),
    )


def folder_list(folders: Sequence[Folder]) -> HTMLFragment:
    """A nested unordered list of folders, or nothing."""
    if not folders:
        return EMPTY

    return html_tag(
        "ul",
        FragmentList(
            html_tag(
                "li",
                html_sequence(
                    folder_name(folder),
                    folder_links(folder),
                    folder_list(folder.folders),
                ),
            )
            for folder in folders
        ),
    )


def folders_to_html(folders: Sequence[Folder], title: str = DEFAULT_TITLE) -> HTMLFragment:
    """Build the complete document for a list of top-level folders."""
    return html_sequence(
        html_raw(HTML_HEADER.format(title=escape_html(title))),
        html_tag("body", folder_list(folders)),
        html_raw(HTML_FOOTER),
    )


class HTMLBookmarkWriter:
    """
    Writer for HTML bookmark documents.

    Renders folders in the order they are stored; links and sub-folders
    are never sorted.
    """

    def __init__(self, title: str = DEFAULT_TITLE):
        """
        Initialize the HTML writer.

        Args:
            title: Title of the generated document
        """
        self.title = title
        self.logger = logging.getLogger(__name__)

    def write(self, folders: Sequence[Folder], sink: TextSink) -> None:
        """
        Write the HTML document for ``folders`` to ``sink``.

        Raises:
            SinkError: If the sink fails; output already written is left as is
        """
        self.logger.debug(f"Rendering {len(folders)} top-level folders")

        try:
            folders_to_html(folders, self.title).write_to(sink)
        except (OSError, ValueError) as e:
            self.logger.error(f"Failed to write HTML output: {e}")
            raise SinkError(f"Failed to write HTML output: {e}") from e

    def write_tree(self, tree: Tree, sink: TextSink) -> None:
        self.write(tree.folders, sink)


def render(folders: Sequence[Folder], sink: TextSink, title: str = DEFAULT_TITLE) -> None:
    """Render top-level folders as an HTML document into ``sink``."""
    HTMLBookmarkWriter(title).write(folders, sink)
