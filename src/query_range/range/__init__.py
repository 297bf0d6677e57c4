# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Range location and iteration.

Submodules:
    utility: Locating, shifting and validating spans
    query_range_iterator: Single-pass iterator over matches or gaps
"""

from query_range.range.utility import (
    check_same_text_type,
    get_range,
    shift_number,
    shift_range,
    shift_range_in_content,
    is_within,
)
from query_range.range.query_range_iterator import QueryRangeIterator

__all__ = [
    # Utility
    "check_same_text_type",
    "get_range",
    "shift_number",
    "shift_range",
    "shift_range_in_content",
    "is_within",
    # Iteration
    "QueryRangeIterator",
]
