# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Query Range
===========

Locate every non-overlapping occurrence of a literal query in a text and
rewrite the text by transforming the occurrences, the text between them,
or both.

Package Structure
-----------------
- **core**: Shared types (Span, Shift, TaggedRun) and constants
- **range**: Locating, shifting and iterating spans
- **reassembly**: Rebuilding a text from transformed matches and gaps
- **transforms**: Named example transforms
- **utils**: Logging setup and string helpers
- **config**: YAML-based settings

Quick Start
-----------
>>> from query_range import QueryRangeIterator, transform_query
>>> content = "haystackneedlehaystackneedlehaystack"
>>> list(QueryRangeIterator("needle", content))
[Span(start=8, end=14), Span(start=22, end=28)]
>>> transform_query("needle", content, str.upper)
'haystackNEEDLEhaystackNEEDLEhaystack'

Offsets index the object passed in: code points for str, bytes for bytes.
"""

__version__ = "0.1.0"

# Re-export commonly used items for convenience
from query_range.core import Span, Shift, TaggedRun, MATCHES, GAPS
from query_range.range import (
    QueryRangeIterator,
    get_range,
    shift_range,
    shift_range_in_content,
    is_within,
)
from query_range.reassembly import (
    reassemble,
    transform,
    transform_query,
    transform_other,
    transform_both,
    transform_all,
)

__all__ = [
    # Version info
    "__version__",
    # Core data structures
    "Span",
    "Shift",
    "TaggedRun",
    "MATCHES",
    "GAPS",
    # Range utilities
    "QueryRangeIterator",
    "get_range",
    "shift_range",
    "shift_range_in_content",
    "is_within",
    # Reassembly
    "reassemble",
    "transform",
    "transform_query",
    "transform_other",
    "transform_both",
    "transform_all",
]
