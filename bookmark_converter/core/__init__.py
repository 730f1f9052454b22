"""
Core bookmark conversion modules.

This package contains the timestamp decoder, the typed field readers, the
bookmark tree builder and the streaming HTML writer.
"""

from .data_models import Folder, Link, Node, Tree
from .html_writer import HTMLBookmarkWriter, render
from .tree_builder import BookmarkTreeBuilder, build_tree, parse

__all__ = [
    'Folder',
    'Link',
    'Node',
    'Tree',
    'HTMLBookmarkWriter',
    'render',
    'BookmarkTreeBuilder',
    'build_tree',
    'parse',
]
