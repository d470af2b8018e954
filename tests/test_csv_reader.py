"""
Tests for the CSV reader (Layer 1: Raw Input → Raw Table).

We need to:
1. Split lines into trimmed cells
2. Honour quotes, escapes and separators
3. Skip blank lines
4. Report malformed input with origin, line and column
"""

import io

import pytest

from associativity.config import CSVDialect
from associativity.csv_reader import parse_csv, parse_csv_file, parse_csv_string
from associativity.errors import CSVFormatError, ErrorKind


class TestBasicParsing:
    """Test plain cells and separators."""

    def test_single_row(self):
        assert parse_csv_string("a,b,c\n") == [["a", "b", "c"]]

    def test_multiple_rows(self):
        assert parse_csv_string("a,b\nc,d\n") == [["a", "b"], ["c", "d"]]

    def test_no_trailing_newline(self):
        assert parse_csv_string("a,b") == [["a", "b"]]

    def test_empty_input(self):
        assert parse_csv_string("") == []

    def test_cells_are_trimmed(self):
        assert parse_csv_string("  a  ,\tb\t, c d \n") == [["a", "b", "c d"]]

    def test_leading_separator(self):
        assert parse_csv_string(",a\n") == [["", "a"]]

    def test_trailing_separator(self):
        assert parse_csv_string("a,\n") == [["a", ""]]

    def test_only_separators(self):
        assert parse_csv_string(",,\n") == [["", "", ""]]

    def test_rows_may_differ_in_length(self):
        assert parse_csv_string("a\nb,c,d\n") == [["a"], ["b", "c", "d"]]

    def test_crlf_line_ends(self):
        assert parse_csv_string("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]

    def test_deterministic(self):
        text = "x, 'y z' ,\\t\n\n1,2\n"
        assert parse_csv_string(text) == parse_csv_string(text)


class TestBlankLines:
    """Test that lines without content produce no rows."""

    def test_whitespace_line_skipped(self):
        assert parse_csv_string("a,b\n    \nc,d\n") == [["a", "b"], ["c", "d"]]

    def test_empty_line_skipped(self):
        assert parse_csv_string("a\n\n\nb\n") == [["a"], ["b"]]

    def test_tabs_only_line_skipped(self):
        assert parse_csv_string("\t \t\n") == []


class TestQuoting:
    """Test quoted cells."""

    def test_embedded_separator(self):
        assert parse_csv_string('a,"b,c",d\n') == [["a", "b,c", "d"]]

    def test_single_quotes(self):
        assert parse_csv_string("'b,c',d\n") == [["b,c", "d"]]

    def test_whitespace_preserved_inside_quotes(self):
        assert parse_csv_string('"  a b  ",c\n') == [["  a b  ", "c"]]

    def test_whitespace_around_quotes_ignored(self):
        assert parse_csv_string('  "a"  ,b\n') == [["a", "b"]]

    def test_other_quote_is_literal(self):
        assert parse_csv_string("\"it's\",'say \"hi\"'\n") == [["it's", 'say "hi"']]

    def test_empty_quoted_cell(self):
        assert parse_csv_string('"",x\n') == [["", "x"]]

    def test_quoted_whitespace_line_is_a_row(self):
        assert parse_csv_string('" "\n') == [[" "]]

    def test_quoted_last_cell(self):
        assert parse_csv_string('a,"b"\n') == [["a", "b"]]


class TestEscaping:
    """Test escape expressions inside cells."""

    def test_escaped_separator(self):
        assert parse_csv_string("x\\,y,z\n") == [["x,y", "z"]]

    def test_escaped_quotes_in_unquoted_cell(self):
        assert parse_csv_string("a\\\"b\\'c\n") == [["a\"b'c"]]

    def test_escaped_quote_inside_quotes(self):
        assert parse_csv_string('"a\\"b"\n') == [['a"b']]

    def test_escaped_backslash(self):
        assert parse_csv_string("a\\\\b,a\\eb\n") == [["a\\b", "a\\b"]]

    def test_escaped_whitespace_trimmed_in_unquoted_cell(self):
        assert parse_csv_string("\\ta\\t , b\n") == [["a", "b"]]

    def test_escaped_whitespace_only_cell_is_empty(self):
        assert parse_csv_string("\\n\\t,x\n") == [["", "x"]]

    def test_escaped_whitespace_kept_inside_quotes(self):
        assert parse_csv_string('"\\ta\\t", b\n') == [["\ta\t", "b"]]

    def test_interior_escaped_whitespace_kept(self):
        assert parse_csv_string(" a\\tb ,c\n") == [["a\tb", "c"]]

    def test_escape_then_quote_is_illegal(self):
        """An escape counts as content, so a quote may not follow it."""
        with pytest.raises(CSVFormatError) as exc_info:
            parse_csv_string("\\t\"a\"\n")
        assert exc_info.value.kind == ErrorKind.ILLEGAL_QUOTE_IN_CELL

    def test_escaped_newline(self):
        assert parse_csv_string("a\\nb\n") == [["a\nb"]]


class TestCSVErrors:
    """Test error handling and reported positions."""

    def test_unknown_escape(self):
        with pytest.raises(CSVFormatError) as exc_info:
            parse_csv_string("ab\\q\n", origin="t.csv")
        err = exc_info.value
        assert err.kind == ErrorKind.UNKNOWN_ESCAPE_CODE
        assert (err.origin, err.line, err.column) == ("t.csv", 1, 4)

    def test_backslash_at_line_end(self):
        with pytest.raises(CSVFormatError) as exc_info:
            parse_csv_string("abc\\\n")
        err = exc_info.value
        assert err.kind == ErrorKind.UNTERMINATED_LINE
        assert err.line == 1
        assert err.column == 4

    def test_unclosed_quote(self):
        with pytest.raises(CSVFormatError) as exc_info:
            parse_csv_string('ok\n"abc\n')
        err = exc_info.value
        assert err.kind == ErrorKind.UNTERMINATED_LINE
        assert err.line == 2

    def test_character_after_closing_quote(self):
        with pytest.raises(CSVFormatError) as exc_info:
            parse_csv_string('"ab" c,d\n')
        err = exc_info.value
        assert err.kind == ErrorKind.UNEXPECTED_CHARACTER_AFTER_QUOTE
        assert err.column == 6

    def test_quote_inside_unquoted_cell(self):
        with pytest.raises(CSVFormatError) as exc_info:
            parse_csv_string('ab"c"\n')
        err = exc_info.value
        assert err.kind == ErrorKind.ILLEGAL_QUOTE_IN_CELL
        assert err.column == 3

    def test_negative_starting_line(self):
        with pytest.raises(CSVFormatError) as exc_info:
            parse_csv_string("a\n", starting_line=-1)
        assert exc_info.value.kind == ErrorKind.NEGATIVE_STARTING_LINE

    def test_starting_line_offsets_line_numbers(self):
        with pytest.raises(CSVFormatError) as exc_info:
            parse_csv_string("a\n\nb\\\n", starting_line=10)
        assert exc_info.value.line == 13

    def test_message_contains_position(self):
        with pytest.raises(CSVFormatError, match=r"in data:2\.2"):
            parse_csv_string('a\nb"\n', origin="data")

    def test_no_partial_result(self):
        """A single malformed line fails the whole parse."""
        with pytest.raises(CSVFormatError):
            parse_csv_string("a,b\nc,d\n'e\n")


class TestInputKinds:
    """Test the different input sources."""

    def test_text_stream(self):
        assert parse_csv(io.StringIO("a,b\n")) == [["a", "b"]]

    def test_list_of_lines(self):
        assert parse_csv(["a,b\n", "c\n"]) == [["a", "b"], ["c"]]

    def test_bytes(self):
        assert parse_csv("ä,b\n".encode("utf-8")) == [["ä", "b"]]

    def test_binary_stream(self):
        assert parse_csv(io.BytesIO(b"a,b\nc\n")) == [["a", "b"], ["c"]]

    def test_parse_csv_file(self, tmp_path):
        csv_file = tmp_path / "table.csv"
        csv_file.write_text("a, b\n'c, d'\n", encoding="utf-8")
        assert parse_csv_file(str(csv_file)) == [["a", "b"], ["c, d"]]

    def test_file_errors_name_the_file(self, tmp_path):
        csv_file = tmp_path / "bad.csv"
        csv_file.write_text('"open\n', encoding="utf-8")
        with pytest.raises(CSVFormatError) as exc_info:
            parse_csv_file(str(csv_file))
        assert exc_info.value.origin == str(csv_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_csv_file(str(tmp_path / "missing.csv"))


class TestDialect:
    """Test custom control characters."""

    def test_semicolon_separator(self):
        dialect = CSVDialect(separator=";")
        assert parse_csv_string("a,b;c\n", dialect=dialect) == [["a,b", "c"]]

    def test_invalid_dialect(self):
        with pytest.raises(ValueError):
            CSVDialect(separator=";;")

    def test_duplicate_control_characters(self):
        with pytest.raises(ValueError):
            CSVDialect(separator="'")
