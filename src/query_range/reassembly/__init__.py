# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Reassembly engine.

Rewrites a text by transforming the occurrences of a query, the text between
them, or both, and concatenating the results in their original order.
"""

from query_range.reassembly.transform import (
    identity,
    collect_tagged_runs,
    merge_tagged_runs,
    reassemble,
    transform,
    transform_query,
    transform_other,
    transform_both,
    transform_all,
)

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
