# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Reassembly of a text from independently transformed matches and gaps.

This module runs a matches iterator and a gaps iterator over the same text,
transforms the segments of either polarity, tags every segment with the
offset it came from and concatenates them back in order.
"""

import logging
from typing import Iterable, List, Optional

from query_range.core import GAPS, MATCHES, AnyText, TaggedRun, Transform
from query_range.range import QueryRangeIterator

logger = logging.getLogger(__name__)


def identity(segment: AnyText) -> AnyText:
    """Return the segment unchanged."""
    return segment


def collect_tagged_runs(
    query: AnyText,
    content: AnyText,
    polarity: str,
    transform_fn: Optional[Transform] = None,
) -> List[TaggedRun]:
    """
    Drain one iterator and transform each segment it yields.

    Args:
        query: The search query.
        content: The content to look for the query in.
        polarity: "matches" or "gaps".
        transform_fn: Applied to each segment; identity if None.

    Returns:
        List[TaggedRun]: Transformed segments tagged with their original span.
    """
    transform_fn = transform_fn or identity
    return [
        TaggedRun(transform_fn(span.slice_of(content)), span.start, span.end)
        for span in QueryRangeIterator(query, content, polarity)
    ]


def merge_tagged_runs(runs: Iterable[TaggedRun], empty: AnyText) -> AnyText:
    """
    Order runs by their original offsets and concatenate their segments.

    Matches and gaps never share a start offset unless the gap is empty, in
    which case the gap comes first. Two non-empty runs starting at the same
    offset mean the iterators disagree; they are logged and merged in input
    order.

    Args:
        runs: Tagged runs from both polarities.
        empty: The empty value of the content's type ("" or b"").

    Returns:
        The concatenated text.
    """
    merged = sorted(runs, key=lambda run: run.sort_key)
    for previous, current in zip(merged, merged[1:]):
        if previous.start == current.start and previous.end != previous.start:
            logger.error(
                f"Overlapping runs at offset {current.start}: "
                f"{previous.start}-{previous.end} and {current.start}-{current.end}"
            )
    return empty.join(run.segment for run in merged)


def reassemble(
    query: AnyText,
    content: AnyText,
    transform_matches: Optional[Transform] = None,
    transform_gaps: Optional[Transform] = None,
) -> AnyText:
    """
    Rebuild the content with the matches and the gaps transformed independently.

    The polarity without a transform is copied verbatim.

    Args:
        query: The search query.
        content: The content to look for the query in.
        transform_matches: Transform run on every occurrence of the query.
        transform_gaps: Transform run on the content between occurrences.

    Returns:
        The reassembled content.

    Raises:
        ValueError: If neither transform is given.
    """
    if transform_matches is None and transform_gaps is None:
        raise ValueError("At least one of transform_matches or transform_gaps is required")

    runs = collect_tagged_runs(query, content, MATCHES, transform_matches)
    runs += collect_tagged_runs(query, content, GAPS, transform_gaps)
    logger.debug(f"Reassembling {len(runs)} runs for query {query!r}")
    return merge_tagged_runs(runs, content[:0])


def transform(
    query: AnyText,
    content: AnyText,
    transform_fn: Transform,
    invert: bool = False,
) -> AnyText:
    """
    Reassemble the content, transforming either the query content or the rest.

    Args:
        query: The search query.
        content: The content to look for the query in.
        transform_fn: Transform to run on the selected segments.
        invert: If True, apply the transform to the non-query content.

    Example:
        >>> transform("needle", "haystackneedlehaystack", str.upper)
        'haystackNEEDLEhaystack'
    """
    if invert:
        return reassemble(query, content, transform_gaps=transform_fn)
    return reassemble(query, content, transform_matches=transform_fn)


def transform_query(query: AnyText, content: AnyText, transform_fn: Transform) -> AnyText:
    """
    Reassemble the content, transforming every occurrence of the query.

    Example:
        >>> transform_query("needle", "haystackneedlehaystackneedlehaystack", str.upper)
        'haystackNEEDLEhaystackNEEDLEhaystack'
    """
    return transform(query, content, transform_fn, invert=False)


def transform_other(query: AnyText, content: AnyText, transform_fn: Transform) -> AnyText:
    """
    Reassemble the content, transforming everything but the query.

    Example:
        >>> transform_other("needle", "haystackneedlehaystackneedlehaystack", str.upper)
        'HAYSTACKneedleHAYSTACKneedleHAYSTACK'
    """
    return transform(query, content, transform_fn, invert=True)


def transform_both(
    query: AnyText,
    content: AnyText,
    transform_query_fn: Transform,
    transform_other_fn: Transform,
) -> AnyText:
    """Reassemble the content, transforming matches and gaps in a single pass."""
    return reassemble(query, content, transform_query_fn, transform_other_fn)


def transform_all(
    query: AnyText,
    content: AnyText,
    transform_query_fn: Transform,
    transform_other_fn: Transform,
) -> AnyText:
    """
    Transform the query content, then re-scan the result and transform the rest.

    The first pass transforms every occurrence of the query. The second pass
    searches the intermediate text for the transformed query and transforms
    the gaps around it. The query transform must treat every occurrence the
    same way it treats the bare query, otherwise the second pass finds the
    wrong boundaries.

    Args:
        query: The search query.
        content: The content to look for the query in.
        transform_query_fn: Transform to run on all query content.
        transform_other_fn: Transform to run on all non-query content.

    Example:
        >>> from query_range.utils import to_title_case
        >>> transform_all(
        ...     "needle",
        ...     "haystackneedlehaystackneedlehaystack",
        ...     str.upper,
        ...     to_title_case,
        ... )
        'HaystackNEEDLEHaystackNEEDLEHaystack'
    """
    transformed_content = transform_query(query, content, transform_query_fn)
    transformed_query = transform_query_fn(query)
    return transform_other(transformed_query, transformed_content, transform_other_fn)


__all__ = [
    "identity",
    "collect_tagged_runs",
    "merge_tagged_runs",
    "reassemble",
    "transform",
    "transform_query",
    "transform_other",
    "transform_both",
    "transform_all",
]
