# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Occurrence iterator over a text.

This module provides QueryRangeIterator, a single-pass cursor that yields the
spans of every non-overlapping occurrence of a literal query (matches
polarity) or the spans of the text between them (gaps polarity). Each step
searches only the part of the text not yet consumed and re-bases the result
into full-text coordinates through the range shifter.
"""

import logging
from typing import Generic, List, Optional

from query_range.core import GAPS, MATCHES, AnyText, Shift, Span, all_polarities
from query_range.range.utility import (
    check_same_text_type,
    get_range,
    is_within,
    shift_range,
    shift_range_in_content,
)

logger = logging.getLogger(__name__)


class QueryRangeIterator(Generic[AnyText]):
    """
    Iterates the spans of a query, or of the text between its occurrences.

    Spans are half-open and always expressed against the full content, so
    ``content[start:end]`` gives back the matched (or gap) text.

    In gaps polarity a query that never occurs yields a single gap spanning
    the whole content, and occurrences touching either end of the content
    or each other yield zero-length gaps. An empty content yields nothing in
    either polarity.

    Attributes:
        query: The literal searched for.
        content: The full text being scanned.
        polarity: Either "matches" or "gaps", fixed for the iterator's lifetime.

    Example:
        >>> content = "haystackneedlehaystackneedlehaystack"
        >>> list(QueryRangeIterator("needle", content))
        [Span(start=8, end=14), Span(start=22, end=28)]
        >>> QueryRangeIterator.gaps("needle", content).collect_strings()
        ['haystack', 'haystack', 'haystack']
    """

    def __init__(self, query: AnyText, content: AnyText, polarity: str = MATCHES):
        check_same_text_type(query, content)
        if polarity not in all_polarities:
            raise ValueError(
                f"Invalid polarity: {polarity}. Must be one of {all_polarities}"
            )
        self.query = query
        self.content = content
        self.polarity = polarity
        self._window = content
        self._consumed = 0
        self._exhausted = False

    @classmethod
    def matches(
        cls, query: AnyText, content: AnyText
    ) -> "QueryRangeIterator[AnyText]":
        """Create an iterator over each found occurrence of the query."""
        return cls(query, content, MATCHES)

    @classmethod
    def gaps(
        cls, query: AnyText, content: AnyText
    ) -> "QueryRangeIterator[AnyText]":
        """Create an iterator over the content in between found occurrences."""
        return cls(query, content, GAPS)

    @property
    def inverted(self) -> bool:
        return self.polarity == GAPS

    @property
    def window(self) -> AnyText:
        """The suffix of the content not consumed yet."""
        return self._window

    @property
    def consumed(self) -> int:
        """Number of offsets removed from the front of the content so far."""
        return self._consumed

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> "QueryRangeIterator[AnyText]":
        return self

    def __next__(self) -> Span:
        if self._exhausted:
            raise StopIteration
        if self.inverted:
            span = self._next_gap()
        else:
            span = self._next_match()
        if span is None:
            self._exhausted = True
            raise StopIteration
        return span

    def collect_strings(self) -> List[AnyText]:
        """
        Drain the remaining spans and return the content found at each of them.

        Returns:
            List of owned substrings (or byte strings) in content order.
        """
        return [span.slice_of(self.content) for span in self]

    def _advance(self, next_start: int) -> None:
        """Drop the first ``next_start`` offsets of the window."""
        start_length = len(self._window)
        self._window = self._window[next_start:]
        self._consumed += start_length - len(self._window)

    def _next_match(self) -> Optional[Span]:
        """Get the next span that matches the query."""
        window = self._window
        if not window:
            return None

        span = get_range(self.query, window)
        if span is None or not is_within(window, span):
            return None

        rebased = shift_range_in_content(span, Shift.up(self._consumed), self.content)
        if rebased is None:
            logger.error(
                f"Could not re-base match {span} by {self._consumed} "
                f"into content of length {len(self.content)}"
            )
            return None

        self._advance(span.end)
        logger.debug(f"Match at {rebased}, {self._consumed} consumed")
        return rebased

    def _next_gap(self) -> Optional[Span]:
        """Get the next span that doesn't match the query."""
        window = self._window
        length = len(window)
        if length == 0 and self._consumed == 0:
            # Nothing to scan at all
            return None

        span = get_range(self.query, window)
        if span is None:
            span = Span(length, length)
            self._exhausted = True

        gap = shift_range(Span(0, span.start), Shift.up(self._consumed))
        if gap is None:
            logger.error(
                f"Could not re-base gap ending at {span.start} by {self._consumed}"
            )
            return None

        self._advance(min(span.end, length))
        logger.debug(f"Gap at {gap}, {self._consumed} consumed")
        return gap


__all__ = [
    "QueryRangeIterator",
]
