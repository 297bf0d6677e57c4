# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Range utilities for locating and re-basing query occurrences.

This module provides the pure helpers the occurrence iterator is built on:
finding the first literal occurrence of a query, shifting spans by a signed
magnitude without wrapping, and checking spans against a text's length.
None of these functions raise for out-of-bounds results; they return None.
"""

from typing import Optional, Tuple, Union

from query_range.core import MAX_OFFSET, Shift, Span, Text

SpanLike = Union[Span, Tuple[int, int]]


def check_same_text_type(query: Text, content: Text) -> None:
    """
    Ensure the query and the content are both str or both bytes.

    Raises:
        TypeError: If the types are mixed or not text at all.
    """
    if isinstance(content, str) and isinstance(query, str):
        return
    if isinstance(content, bytes) and isinstance(query, bytes):
        return
    raise TypeError(
        f"Query and content must both be str or both be bytes, "
        f"got {type(query).__name__} and {type(content).__name__}"
    )


def get_range(query: Text, content: Text) -> Optional[Span]:
    """
    Get the first span of the query in the content.

    An empty query is never found.

    Args:
        query: The literal to search for.
        content: The text to search in.

    Returns:
        Optional[Span]: The span of the first occurrence, or None if absent.

    Example:
        >>> get_range("needle", "haystackneedle")
        Span(start=8, end=14)
    """
    if not query:
        return None
    start = content.find(query)
    if start == -1:
        return None
    end = start + len(query)
    if end > len(content):
        return None
    return Span(start, end)


def shift_number(number: int, shift: Shift) -> Optional[int]:
    """Shift a single offset, returning None on underflow or overflow."""
    return shift.apply(number)


def shift_range(span: SpanLike, shift: Shift) -> Optional[Span]:
    """
    Create a new span with the start and end values shifted by the given amount.

    Args:
        span: The span to move.
        shift: Direction and magnitude of the move.

    Returns:
        Optional[Span]: The shifted span, or None if either end would fall below
        zero or above the largest sequence index.

    Example:
        >>> shift_range((0, 5), Shift.up(2))
        Span(start=2, end=7)
        >>> shift_range((1, 5), Shift.down(3)) is None
        True
    """
    return shift.apply_to_span(Span(*span))


def shift_range_in_content(
    span: SpanLike, shift: Shift, content: Text
) -> Optional[Span]:
    """
    Shift a span and check that the result still lies within the content.

    Example:
        >>> shift_range_in_content((0, 5), Shift.up(2), "this is a test")
        Span(start=2, end=7)
        >>> shift_range_in_content((0, 5), Shift.up(20), "this is a test") is None
        True
    """
    shifted = shift_range(span, shift)
    if shifted is None or not is_within(content, shifted):
        return None
    return shifted


def is_within(content: Text, span: SpanLike) -> bool:
    """
    Check whether a half-open span exists in the given content.

    The span must be well formed (0 <= start <= end) and end no later than
    the content does.

    Example:
        >>> is_within("this is a test", (0, 2))
        True
        >>> is_within("this is a test", (20, 25))
        False
    """
    start, end = span
    if start < 0 or end < start or end > MAX_OFFSET:
        return False
    return end <= len(content)


__all__ = [
    "check_same_text_type",
    "get_range",
    "shift_number",
    "shift_range",
    "shift_range_in_content",
    "is_within",
]
