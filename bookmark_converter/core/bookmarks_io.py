"""
Reading bookmark files and writing HTML output.

Output goes either to standard output or to a named file; a file that
was only partially written because of an error is removed.
"""

import json
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Sequence, TextIO, Union

from bookmark_converter.core.data_models import Folder
from bookmark_converter.core.html_writer import DEFAULT_TITLE, render
from bookmark_converter.utils.error_handler import InputError, SinkError

STDOUT = "STDOUT"

logger = logging.getLogger(__name__)


def default_bookmarks_path() -> Path:
    """Location of the Opera bookmarks file on Linux."""
    return Path.home() / ".config" / "opera" / "Bookmarks"


def load_document(file_path: Union[str, Path]) -> Any:
    """
    Read and decode a bookmarks JSON file.

    Args:
        file_path: Path to the bookmarks file

    Returns:
        The decoded JSON document

    Raises:
        InputError: If the file cannot be read or is not valid JSON
    """
    file_path = Path(file_path)
    logger.info(f"Reading bookmarks from {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON in {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise InputError(f"Unable to decode {file_path} as UTF-8: {e}") from e
    except OSError as e:
        raise InputError(f"Error reading file {file_path}: {e.strerror or e}") from e


@contextmanager
def output_stream(name: Union[str, Path]) -> Iterator[TextIO]:
    """
    Open the output destination for writing.

    Args:
        name: A file path, or STDOUT for standard output

    Yields:
        A text stream; standard output is flushed and a file is closed on
        exit. If anything fails, a file is deleted before the error
        propagates.
    """
    if str(name) == STDOUT:
        yield sys.stdout
        sys.stdout.flush()
        return

    path = Path(name)
    out = open(path, "w", encoding="utf-8")

    try:
        with out:
            yield out
    except BaseException:
        logger.warning(f"Removing incomplete output file {path}")
        path.unlink(missing_ok=True)
        raise


def write_folders(
    name: Union[str, Path],
    folders: Sequence[Folder],
    title: str = DEFAULT_TITLE,
) -> None:
    """
    Write folders as an HTML document to a file or standard output.

    Raises:
        SinkError: If the destination cannot be opened, written or closed
    """
    try:
        with output_stream(name) as out:
            render(folders, out, title)
    except OSError as e:
        raise SinkError(f"Error writing output {name}: {e}") from e

    if str(name) != STDOUT:
        logger.info(f"Wrote HTML bookmarks to {name}")
