"""
Pytest configuration and shared fixtures for bookmark converter tests.

This module provides sample bookmark documents and temporary files shared
across test modules.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Generator, Optional

import pytest

# 2012-12-14 23:06:40 UTC
SAMPLE_TIMESTAMP = "13000000000000000"
# 2022-06-18 00:53:20 UTC
LATER_TIMESTAMP = "13300000000000000"


# ============================================================================
# Environment
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path: Path) -> Path:
    """Keep tests away from the real home directory and working directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    level = root.level
    try:
        yield
    finally:
        for handler in root.handlers[:]:
            if type(handler) in (logging.StreamHandler, logging.FileHandler):
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)


# ============================================================================
# Bookmark Node Factories
# ============================================================================


@pytest.fixture
def make_link() -> Callable[..., Dict[str, Any]]:
    """Factory for "url" nodes."""

    def _make_link(
        name: str = "Example",
        url: str = "https://example.com",
        date_added: Optional[str] = SAMPLE_TIMESTAMP,
        **extra: Any,
    ) -> Dict[str, Any]:
        node = {"type": "url", "name": name, "url": url}
        if date_added is not None:
            node["date_added"] = date_added
        node.update(extra)
        return node

    return _make_link


@pytest.fixture
def make_folder() -> Callable[..., Dict[str, Any]]:
    """Factory for "folder" nodes."""

    def _make_folder(
        name: str = "Folder",
        children: Optional[list] = None,
        date_added: Optional[str] = SAMPLE_TIMESTAMP,
        **extra: Any,
    ) -> Dict[str, Any]:
        node = {"type": "folder", "name": name}
        if date_added is not None:
            node["date_added"] = date_added
        if children is not None:
            node["children"] = children
        node.update(extra)
        return node

    return _make_folder


# ============================================================================
# Sample Documents
# ============================================================================


@pytest.fixture
def minimal_document() -> Dict[str, Any]:
    """The smallest useful document: an untyped bookmarks bar with one link."""
    return {
        "roots": {
            "bookmark_bar": {
                "name": "Bookmarks Bar",
                "date_added": SAMPLE_TIMESTAMP,
                "children": [
                    {
                        "type": "url",
                        "name": "Example",
                        "url": "https://example.com",
                        "date_added": SAMPLE_TIMESTAMP,
                    }
                ],
            }
        }
    }


@pytest.fixture
def chrome_document(make_link, make_folder) -> Dict[str, Any]:
    """A document laid out the way Chrome writes it."""
    return {
        "checksum": "0123456789abcdef0123456789abcdef",
        "roots": {
            "bookmark_bar": make_folder(
                "Bookmarks bar",
                date_modified=LATER_TIMESTAMP,
                children=[
                    make_link("Python", "https://www.python.org/", id="2"),
                    make_folder(
                        "Machine Learning",
                        children=[
                            make_link("Papers & Notes", "https://arxiv.org/?q=a&b=<c>"),
                            make_folder("Empty", children=[]),
                        ],
                    ),
                    make_link('Say "hi"', "https://example.com/'quoted'"),
                ],
            ),
            "other": make_folder("Other bookmarks", children=[]),
            "synced": make_folder(
                "Mobile bookmarks",
                children=[make_link("News", "https://news.example.org/")],
            ),
        },
        "version": 1,
    }


@pytest.fixture
def bookmarks_file(tmp_path: Path, chrome_document: Dict[str, Any]) -> Path:
    """The Chrome-style document written to a file."""
    path = tmp_path / "Bookmarks"
    path.write_text(json.dumps(chrome_document, indent=3), encoding="utf-8")
    return path
