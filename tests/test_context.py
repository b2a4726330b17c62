"""Tests for selection and context helpers."""

import pytest

from explaincode.services.context import select_lines, surrounding_context


class TestSurroundingContext:
    """Tests for surrounding_context."""

    def test_whole_file_is_context(self):
        assert surrounding_context("a\nb\nc\n", "b\n") == "a\nb\nc\n"

    def test_falls_back_to_selection_when_no_file(self):
        assert surrounding_context(None, "x = 1") == "x = 1"

    def test_falls_back_to_selection_when_file_empty(self):
        assert surrounding_context("", "x = 1") == "x = 1"


class TestSelectLines:
    """Tests for select_lines."""

    TEXT = "one\ntwo\nthree\n"

    def test_whole_text_by_default(self):
        assert select_lines(self.TEXT) == self.TEXT

    def test_inclusive_range(self):
        assert select_lines(self.TEXT, 2, 3) == "two\nthree\n"

    def test_single_line(self):
        assert select_lines(self.TEXT, 2, 2) == "two\n"

    def test_open_ended_start(self):
        assert select_lines(self.TEXT, start_line=3) == "three\n"

    def test_text_without_trailing_newline(self):
        assert select_lines("a\nb", 2, 2) == "b"

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="outside"):
            select_lines(self.TEXT, 1, 4)

    def test_zero_start(self):
        with pytest.raises(ValueError):
            select_lines(self.TEXT, 0, 1)

    def test_reversed_range(self):
        with pytest.raises(ValueError, match="after"):
            select_lines(self.TEXT, 3, 2)

    def test_empty_text(self):
        with pytest.raises(ValueError, match="empty"):
            select_lines("")

    def test_form_feed_does_not_split_lines(self):
        """Test only newlines count, so a form feed stays inside its line."""
        text = "a = 1\f# page two\nb = 2\nc = 3\n"
        assert select_lines(text, 3, 3) == "c = 3\n"
        assert select_lines(text, 1, 1) == "a = 1\f# page two\n"

    def test_unicode_separators_do_not_split_lines(self):
        text = "x = 'a\u2028b'\ny = 'c\x85d'\n"
        assert select_lines(text, 2, 2) == "y = 'c\x85d'\n"
        with pytest.raises(ValueError, match="outside"):
            select_lines(text, 1, 3)

    def test_crlf_line_endings_kept(self):
        assert select_lines("one\r\ntwo\r\n", 2, 2) == "two\r\n"
