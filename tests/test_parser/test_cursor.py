"""Tests for the script cursor."""

from just_tcl.parser import Cursor


class TestLookAhead:
    """Test peeking at characters."""

    def test_defaults_to_first_character(self):
        cursor = Cursor("abcde")
        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.peek(4) == "e"

    def test_peek_past_end_is_empty(self):
        cursor = Cursor("abcde")
        assert cursor.peek(len("abcde")) == ""
        assert cursor.peek(100) == ""

    def test_accepts_a_character_sequence(self):
        cursor = Cursor(tuple("xyz"))
        assert cursor.peek(2) == "z"
        assert cursor.slice(0, 3) == "xyz"


class TestAdvance:
    """Test consuming characters."""

    def test_advance_one(self):
        cursor = Cursor("abcde")
        cursor.advance()
        assert cursor.peek() == "b"

    def test_advance_many(self):
        cursor = Cursor("abcde")
        cursor.advance(2)
        assert cursor.peek() == "c"
        assert cursor.position == 2

    def test_at_end(self):
        cursor = Cursor("abcde")
        assert not cursor.at_end()
        assert cursor.at_end(5)
        cursor.advance(5)
        assert cursor.at_end()

    def test_advance_clamps_at_end(self):
        cursor = Cursor("abc")
        cursor.advance(10)
        assert cursor.position == 3
        assert cursor.remaining() == 0
        assert cursor.peek() == ""

    def test_remaining_counts_down_to_zero(self):
        cursor = Cursor("abcde")
        for expected in (5, 4, 3, 2, 1, 0, 0):
            assert cursor.remaining() == expected
            cursor.advance()

    def test_empty_input(self):
        cursor = Cursor("")
        assert cursor.at_end()
        assert cursor.remaining() == 0
        assert cursor.peek() == ""
