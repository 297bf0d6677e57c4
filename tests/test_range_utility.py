# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Tests for locating, shifting and validating spans.

Run with: python -m pytest tests/test_range_utility.py -v
"""

import pytest

from query_range.core import MAX_OFFSET, Shift, Span
from query_range.range.utility import (
    check_same_text_type,
    get_range,
    is_within,
    shift_number,
    shift_range,
    shift_range_in_content,
)


class TestGetRange:
    """Test the first-occurrence locator."""

    def test_finds_first_occurrence(self):
        """Test that only the first of several occurrences is returned."""
        assert get_range("needle", "haystackneedlehaystackneedle") == (8, 14)

    def test_returns_span(self):
        """Test that the result is a Span usable to slice the content."""
        content = "haystackneedle"
        span = get_range("needle", content)
        assert isinstance(span, Span)
        assert span.slice_of(content) == "needle"
        assert span.length == 6

    def test_not_found(self):
        """Test that an absent query gives None."""
        assert get_range("zzz", "haystack") is None

    def test_query_longer_than_content(self):
        """Test that a query longer than the content is never found."""
        assert get_range("needles", "needle") is None

    def test_empty_query_is_never_found(self):
        """Test the chosen behavior for an empty query."""
        assert get_range("", "haystack") is None
        assert get_range("", "") is None

    def test_bytes(self):
        """Test that bytes content yields byte offsets."""
        content = "café needle".encode("utf-8")
        assert get_range(b"needle", content) == (6, 12)

    def test_str_offsets_are_code_points(self):
        """Test that str content yields code point offsets."""
        assert get_range("needle", "café needle") == (5, 11)


class TestShift:
    """Test the Shift value and single-offset arithmetic."""

    def test_apply_up(self):
        assert Shift.up(2).apply(5) == 7

    def test_apply_down(self):
        assert Shift.down(3).apply(8) == 5

    def test_underflow(self):
        """Test that going below zero is reported as None."""
        assert Shift.down(3).apply(2) is None

    def test_overflow(self):
        """Test that going above the largest sequence index is reported as None."""
        assert Shift.up(1).apply(MAX_OFFSET) is None
        assert Shift.up(0).apply(MAX_OFFSET) == MAX_OFFSET

    def test_shift_number_delegates(self):
        assert shift_number(5, Shift.up(2)) == 7
        assert shift_number(0, Shift.down(1)) is None

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            Shift(-1)

    def test_invalid_direction_rejected(self):
        with pytest.raises(ValueError):
            Shift(1, "sideways")


class TestShiftRange:
    """Test shifting whole spans."""

    def test_shift_up(self):
        assert shift_range((0, 5), Shift.up(2)) == (2, 7)
        assert shift_range((0, 5), Shift.up(20)) == (20, 25)

    def test_shift_down(self):
        assert shift_range((4, 7), Shift.down(3)) == (1, 4)

    def test_shift_down_underflow(self):
        """Test that a shift moving the start below zero fails."""
        assert shift_range((2, 7), Shift.down(3)) is None

    def test_shift_up_overflow(self):
        """Test that a shift moving the end past the largest index fails."""
        assert shift_range((0, MAX_OFFSET), Shift.up(1)) is None

    def test_round_trip(self):
        shifted = shift_range(Span(3, 9), Shift.up(11))
        assert shift_range(shifted, Shift.down(11)) == (3, 9)


class TestShiftRangeInContent:
    """Test shifting with validation against a reference text."""

    def test_within_content(self):
        assert shift_range_in_content((0, 5), Shift.up(2), "this is a test") == (2, 7)

    def test_outside_content(self):
        assert shift_range_in_content((0, 5), Shift.up(20), "this is a test") is None

    def test_end_exactly_at_content_end(self):
        """Test that a span ending at the content length is still valid."""
        assert shift_range_in_content((0, 4), Shift.up(10), "this is a test") == (10, 14)
        assert shift_range_in_content((0, 4), Shift.up(11), "this is a test") is None

    def test_underflow(self):
        assert shift_range_in_content((0, 4), Shift.down(1), "this is a test") is None


class TestIsWithin:
    """Test span validity checks."""

    def test_within(self):
        assert is_within("012345", (0, 2))

    def test_end_past_content(self):
        assert not is_within("012345", (2, 7))

    def test_far_outside(self):
        assert not is_within("this is a test", (20, 25))

    def test_empty_span_at_end(self):
        """Test that a zero-length span at the very end is valid."""
        assert is_within("012345", (6, 6))

    def test_malformed_spans(self):
        """Test that negative or inverted spans are rejected."""
        assert not is_within("012345", (-1, 2))
        assert not is_within("012345", (4, 2))


class TestCheckSameTextType:
    """Test the str/bytes consistency check."""

    def test_matching_types(self):
        check_same_text_type("a", "abc")
        check_same_text_type(b"a", b"abc")

    @pytest.mark.parametrize(
        "query, content",
        [("a", b"abc"), (b"a", "abc"), (1, "abc")],
    )
    def test_mixed_types(self, query, content):
        with pytest.raises(TypeError):
            check_same_text_type(query, content)
