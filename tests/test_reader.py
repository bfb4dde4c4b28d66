"""
Tests for the shared delimited line reader.
"""

import pytest

from scorerank.errors import FormatError, IoOpenError, IoReadError
from scorerank.ingestion.reader import read_records, split_line, strip_line_ending


class TestSplitLine:
    """Tests for split_line."""

    def test_strips_newline(self):
        assert split_line("a,b\n") == ["a", "b"]

    def test_strips_crlf(self):
        assert split_line("a,b\r\n") == ["a", "b"]

    def test_keeps_inner_spaces(self):
        assert split_line(" a , b \n") == [" a ", " b "]

    def test_empty_fields_are_kept(self):
        assert split_line("a,,\n") == ["a", "", ""]

    def test_strips_only_one_carriage_return(self):
        assert split_line("a,b\r\r\n") == ["a", "b\r"]

    def test_lone_carriage_return_is_kept(self):
        assert split_line("a,b\r") == ["a", "b\r"]


class TestStripLineEnding:
    """Tests for strip_line_ending."""

    @pytest.mark.parametrize("line, expected", [
        ("abc\n", "abc"),
        ("abc\r\n", "abc"),
        ("abc\r\r\n", "abc\r"),
        ("abc\n\n", "abc\n"),
        ("abc", "abc"),
        ("\r\n", ""),
    ])
    def test_strip(self, line, expected):
        assert strip_line_ending(line) == expected


class TestReadRecords:
    """Tests for read_records."""

    def test_skips_header(self, write_file):
        path = write_file("f.csv", "x,y\na,b\nc,d\n")
        records = list(read_records(path, 2, "test file"))
        assert records == [(2, ["a", "b"]), (3, ["c", "d"])]

    def test_header_is_not_validated(self, write_file):
        path = write_file("f.csv", "only one header field\na,b\n")
        assert list(read_records(path, 2, "test file")) == [(2, ["a", "b"])]

    def test_last_line_without_newline(self, write_file):
        path = write_file("f.csv", "x,y\na,b")
        assert list(read_records(path, 2, "test file")) == [(2, ["a", "b"])]

    def test_crlf_line_endings(self, write_file):
        path = write_file("f.csv", "x,y\r\na,b\r\nc,d\r\n")
        fields = [f for _, f in read_records(path, 2, "test file")]
        assert fields == [["a", "b"], ["c", "d"]]

    def test_extra_carriage_return_stays_in_field(self, write_file):
        path = write_file("f.csv", "x,y\na,b\r\r\n")
        assert list(read_records(path, 2, "test file")) == [(2, ["a", "b\r"])]

    def test_skips_blank_lines(self, write_file):
        path = write_file("f.csv", "x,y\na,b\n\nc,d\n\n")
        records = list(read_records(path, 2, "test file"))
        assert records == [(2, ["a", "b"]), (4, ["c", "d"])]

    def test_empty_file(self, write_file):
        path = write_file("f.csv", "")
        assert list(read_records(path, 2, "test file")) == []

    def test_header_only(self, write_file):
        path = write_file("f.csv", "x,y\n")
        assert list(read_records(path, 2, "test file")) == []

    def test_too_few_fields(self, write_file):
        path = write_file("f.csv", "x,y\na,b\nc\n")
        with pytest.raises(FormatError) as exc_info:
            list(read_records(path, 2, "test file"))
        assert exc_info.value.line_number == 3
        assert exc_info.value.path == path
        assert "expected 2 fields, found 1" in str(exc_info.value)

    def test_too_many_fields(self, write_file):
        path = write_file("f.csv", "x,y\na,b,c\n")
        with pytest.raises(FormatError):
            list(read_records(path, 2, "test file"))

    def test_whitespace_only_line_is_a_record(self, write_file):
        # Only truly empty lines are skipped
        path = write_file("f.csv", "x,y\n   \n")
        with pytest.raises(FormatError):
            list(read_records(path, 2, "test file"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(IoOpenError) as exc_info:
            list(read_records(tmp_path / "missing.csv", 2, "test file"))
        assert "test file" in str(exc_info.value)

    def test_directory_cannot_be_opened(self, tmp_path):
        with pytest.raises(IoOpenError):
            list(read_records(tmp_path, 2, "test file"))

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "f.csv"
        path.write_bytes(b"x,y\na,\xff\xfe\n")
        with pytest.raises(IoReadError):
            list(read_records(path, 2, "test file"))
