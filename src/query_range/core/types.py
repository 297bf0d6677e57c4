# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Types shared by the range utilities, the iterator and the reassembly engine.

This module defines:
- Span: a half-open interval of offsets into a text
- Shift: a signed magnitude used to re-base spans
- TaggedRun: a transformed segment keyed by its original start offset
"""

from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Tuple, TypeVar, Union

from query_range.core.constants import (
    DOWN,
    MAX_OFFSET,
    MIN_OFFSET,
    UP,
    all_directions,
)

# Text and query share the same type: code point offsets for str, byte offsets for bytes
Text = Union[str, bytes]
AnyText = TypeVar("AnyText", str, bytes)

# A transform is any total function from a segment to its replacement
Transform = Callable[[AnyText], AnyText]


class Span(NamedTuple):
    """
    Half-open interval ``[start, end)`` of offsets into a text.

    Being a tuple, a span compares equal to ``(start, end)`` and unpacks
    the same way the plain tuples used elsewhere do.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        """Number of offsets covered by the span."""
        return self.end - self.start

    def slice_of(self, text: AnyText) -> AnyText:
        """Return the part of ``text`` covered by the span."""
        return text[self.start : self.end]


@dataclass(frozen=True)
class Shift:
    """
    A magnitude and a direction for moving a span.

    Attributes:
        amount: Non-negative number of offsets to move by.
        direction: Either "up" (increase offsets) or "down" (decrease offsets).

    Example:
        >>> Shift.up(2).apply(5)
        7
        >>> Shift.down(8).apply(5) is None
        True
    """

    amount: int
    direction: str = UP

    def __post_init__(self):
        if self.direction not in all_directions:
            raise ValueError(
                f"Invalid shift direction: {self.direction}. Must be one of {all_directions}"
            )
        if self.amount < 0:
            raise ValueError(f"Shift amount must be non-negative, got {self.amount}")

    @classmethod
    def up(cls, amount: int) -> "Shift":
        return cls(amount, UP)

    @classmethod
    def down(cls, amount: int) -> "Shift":
        return cls(amount, DOWN)

    def apply(self, number: int) -> Optional[int]:
        """
        Shift a single offset.

        Returns:
            Optional[int]: The shifted offset, or None on underflow below zero
            or overflow above the largest sequence index.
        """
        if self.direction == UP:
            shifted = number + self.amount
        else:
            shifted = number - self.amount
        if shifted < MIN_OFFSET or shifted > MAX_OFFSET:
            return None
        return shifted

    def apply_to_span(self, span: "Span") -> Optional["Span"]:
        """Shift both ends of a span, or return None if either end is out of bounds."""
        start = self.apply(span.start)
        end = self.apply(span.end)
        if start is None or end is None:
            return None
        return Span(start, end)


class TaggedRun(NamedTuple):
    """
    A produced segment paired with the span it came from.

    Runs are merged by ``start``; ``end`` only orders a zero-length gap ahead
    of the match that begins at the same offset.
    """

    segment: Text
    start: int
    end: int

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (self.start, self.end)
