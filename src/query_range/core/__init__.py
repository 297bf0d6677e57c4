# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Core data structures for the query range package.

Classes:
    Span: Half-open offset interval.
    Shift: Direction and magnitude for re-basing spans.
    TaggedRun: Segment keyed by its original start offset.

Constants:
    Polarity constants (MATCHES, GAPS)
    Shift direction constants (UP, DOWN)
    Offset limits (MAX_OFFSET, MIN_OFFSET)
"""

from query_range.core.constants import (
    MATCHES,
    GAPS,
    all_polarities,
    UP,
    DOWN,
    all_directions,
    MAX_OFFSET,
    MIN_OFFSET,
)
from query_range.core.types import (
    Span,
    Shift,
    TaggedRun,
    Text,
    AnyText,
    Transform,
)

__all__ = [
    # Data structures
    "Span",
    "Shift",
    "TaggedRun",
    # Type aliases
    "Text",
    "AnyText",
    "Transform",
    # Polarity constants
    "MATCHES",
    "GAPS",
    "all_polarities",
    # Shift direction constants
    "UP",
    "DOWN",
    "all_directions",
    # Offset limits
    "MAX_OFFSET",
    "MIN_OFFSET",
]
