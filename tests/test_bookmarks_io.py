"""
Tests for reading bookmark files and writing HTML output.
"""

from pathlib import Path

import pytest

from bookmark_converter.core.bookmarks_io import (
    STDOUT,
    default_bookmarks_path,
    load_document,
    output_stream,
    write_folders,
)
from bookmark_converter.core.data_models import Folder, Link
from bookmark_converter.utils.error_handler import InputError, SinkError

FOLDERS = (
    Folder(
        name="Bar",
        key="bookmark_bar",
        links=(Link(name="Example", key="#0", url="https://example.com"),),
    ),
)


class TestLoadDocument:
    def test_valid_file(self, bookmarks_file, chrome_document):
        assert load_document(bookmarks_file) == chrome_document

    def test_accepts_string_path(self, bookmarks_file):
        assert "roots" in load_document(str(bookmarks_file))

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError, match="Error reading file"):
            load_document(tmp_path / "nope")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "Bookmarks"
        path.write_text('{"roots": ', encoding="utf-8")

        with pytest.raises(InputError, match="Invalid JSON") as exc_info:
            load_document(path)

        assert exc_info.value.__cause__ is not None

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "Bookmarks"
        path.write_bytes(b'{"name": "\xff\xfe"}')

        with pytest.raises(InputError, match="UTF-8"):
            load_document(path)

    def test_default_path_under_home(self, isolated_home):
        assert default_bookmarks_path() == isolated_home / ".config" / "opera" / "Bookmarks"


class TestOutputStream:
    def test_file_written(self, tmp_path):
        path = tmp_path / "out.html"

        with output_stream(path) as out:
            out.write("hello")

        assert out.closed
        assert path.read_text(encoding="utf-8") == "hello"

    def test_file_removed_on_error(self, tmp_path):
        path = tmp_path / "out.html"

        with pytest.raises(RuntimeError):
            with output_stream(path) as out:
                out.write("partial")
                raise RuntimeError("render failed")

        assert not path.exists()

    def test_file_removed_on_keyboard_interrupt(self, tmp_path):
        path = tmp_path / "out.html"

        with pytest.raises(KeyboardInterrupt):
            with output_stream(path):
                raise KeyboardInterrupt

        assert not path.exists()

    def test_unopenable_file(self, tmp_path):
        with pytest.raises(OSError):
            with output_stream(tmp_path / "missing" / "out.html"):
                pass

    def test_stdout(self, capsys):
        with output_stream(STDOUT) as out:
            out.write("to stdout")

        assert capsys.readouterr().out == "to stdout"


class TestWriteFolders:
    def test_write_to_file(self, tmp_path):
        path = tmp_path / "bookmarks.html"
        write_folders(path, FOLDERS, "Saved")

        content = path.read_text(encoding="utf-8")
        assert content.startswith("<!DOCTYPE HTML><html>\n")
        assert "<title>Saved</title>" in content
        assert '<a href="https://example.com">Example</a>' in content
        assert content.endswith("</html>\n")

    def test_write_to_stdout(self, capsys):
        write_folders(STDOUT, FOLDERS)

        out = capsys.readouterr().out
        assert "<h4>Bar</h4>" in out
        assert "<title>Bookmarks</title>" in out

    def test_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "bookmarks.html"
        path.write_text("old content that is longer than nothing", encoding="utf-8")

        write_folders(path, ())

        assert "old content" not in path.read_text(encoding="utf-8")

    def test_unwritable_destination(self, tmp_path):
        with pytest.raises(SinkError):
            write_folders(tmp_path / "missing" / "out.html", FOLDERS)

    def test_directory_destination(self, tmp_path):
        with pytest.raises(SinkError):
            write_folders(tmp_path, FOLDERS)

    def test_render_failure_removes_file(self, tmp_path, monkeypatch):
        path = tmp_path / "bookmarks.html"

        def broken_render(folders, sink, title):
            sink.write("<!DOCTYPE HTML>")
            raise SinkError("disk full")

        monkeypatch.setattr("bookmark_converter.core.bookmarks_io.render", broken_render)

        with pytest.raises(SinkError, match="disk full"):
            write_folders(path, FOLDERS)

        assert not Path(path).exists()
