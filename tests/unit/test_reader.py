"""
Unit tests for the line reader.
"""

import pytest

from linetools.reader import (
    FileOpenError,
    LineReadError,
    LineToolsError,
    open_lines,
    strip_newline,
)


class TestStripNewline:
    """Tests for strip_newline."""

    def test_strips_lf(self):
        """Test that a trailing LF is removed."""
        assert strip_newline("abc\n") == "abc"

    def test_strips_crlf(self):
        """Test that a trailing CRLF is removed."""
        assert strip_newline("abc\r\n") == "abc"

    def test_keeps_other_whitespace(self):
        """Test that spaces and tabs are not trimmed."""
        assert strip_newline("  abc \t\n") == "  abc \t"

    def test_no_delimiter(self):
        """Test a final line without delimiter is unchanged."""
        assert strip_newline("abc") == "abc"

    def test_lone_cr_kept(self):
        """Test that a carriage return not followed by LF is kept."""
        assert strip_newline("abc\r") == "abc\r"


class TestOpenLines:
    """Tests for open_lines."""

    def test_reads_lines_without_delimiters(self, tmp_path):
        """Test reading a normal file."""
        path = tmp_path / "input.txt"
        path.write_bytes(b"one\ntwo\r\nthree")

        with open_lines(path) as lines:
            assert list(lines) == ["one", "two", "three"]

    def test_empty_file(self, tmp_path):
        """Test that an empty file yields no lines."""
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")

        with open_lines(path) as lines:
            assert list(lines) == []

    def test_blank_lines_are_lines(self, tmp_path):
        """Test that blank lines are yielded as empty strings."""
        path = tmp_path / "blank.txt"
        path.write_bytes(b"a\n\n\nb\n")

        with open_lines(path) as lines:
            assert list(lines) == ["a", "", "", "b"]

    def test_lone_cr_does_not_split(self, tmp_path):
        """Test that only LF terminates a line."""
        path = tmp_path / "cr.txt"
        path.write_bytes(b"a\rb\n")

        with open_lines(path) as lines:
            assert list(lines) == ["a\rb"]

    def test_lazy_iteration(self, tmp_path):
        """Test that lines are produced one at a time."""
        path = tmp_path / "input.txt"
        path.write_text("x\ny\n", encoding="utf-8")

        with open_lines(path) as lines:
            assert next(lines) == "x"
            assert next(lines) == "y"
            with pytest.raises(StopIteration):
                next(lines)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileOpenError."""
        path = tmp_path / "missing.txt"

        with pytest.raises(FileOpenError) as exc_info:
            with open_lines(path):
                pass

        assert exc_info.value.path == str(path)
        assert str(path) in str(exc_info.value)

    def test_directory_is_not_readable(self, tmp_path):
        """Test that opening a directory raises FileOpenError."""
        with pytest.raises(FileOpenError):
            with open_lines(tmp_path):
                pass

    def test_invalid_utf8_raises_read_error(self, tmp_path):
        """Test that undecodable bytes raise LineReadError."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"fine\n\xff\xfe\xfd\n")

        with pytest.raises(LineReadError) as exc_info:
            with open_lines(path) as lines:
                list(lines)

        assert exc_info.value.path == str(path)

    def test_errors_share_base_class(self):
        """Test the error hierarchy."""
        assert issubclass(FileOpenError, LineToolsError)
        assert issubclass(LineReadError, LineToolsError)

    def test_file_closed_after_block(self, tmp_path, monkeypatch):
        """Test that the handle is released when the block exits early."""
        path = tmp_path / "input.txt"
        path.write_text("a\nb\nc\n", encoding="utf-8")

        handles = []

        def recording_open(*args, **kwargs):
            handle = open(*args, **kwargs)
            handles.append(handle)
            return handle

        monkeypatch.setattr("linetools.reader.open", recording_open, raising=False)

        with open_lines(path) as lines:
            next(lines)
            assert not handles[0].closed

        assert handles[0].closed

    def test_file_closed_after_read_error(self, tmp_path, monkeypatch):
        """Test that the handle is released when a read fails."""
        path = tmp_path / "broken.txt"
        path.write_bytes(b"x\n\xff\n")

        handles = []

        def recording_open(*args, **kwargs):
            handle = open(*args, **kwargs)
            handles.append(handle)
            return handle

        monkeypatch.setattr("linetools.reader.open", recording_open, raising=False)

        with pytest.raises(LineReadError):
            with open_lines(path) as lines:
                list(lines)

        assert handles[0].closed
