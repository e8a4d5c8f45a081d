"""Tests for the message accumulation helpers."""

from __future__ import annotations

from twotrack.messages import concat, freeze, truncate


class TestFreeze:
    def test_list_becomes_tuple(self):
        assert freeze(["a", "b"]) == ("a", "b")

    def test_tuple_is_kept(self):
        messages = ("a",)
        assert freeze(messages) is messages

    def test_string_is_a_single_message(self):
        assert freeze("oops") == ("oops",)

    def test_generator_is_consumed_in_order(self):
        assert freeze(m for m in "xyz") == ("x", "y", "z")


class TestConcat:
    def test_left_before_right(self):
        assert concat(["w1"], ["w2", "w3"]) == ("w1", "w2", "w3")

    def test_empty_sequences(self):
        assert concat((), ()) == ()

    def test_many_sequences(self):
        assert concat(["a"], [], ("b",), ["c"]) == ("a", "b", "c")


class TestTruncate:
    def test_under_limit_unchanged(self):
        assert truncate(("a", "b"), 5) == ["a", "b"]

    def test_over_limit_adds_marker(self):
        assert truncate(("a", "b", "c", "d"), 2) == ["a", "b", "... 2 more"]
