# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
String utilities for the query range package.

This module provides the case conversions used as example transforms. Each
one works on str and bytes alike.
"""

from query_range.core import AnyText


def to_upper_case(content: AnyText) -> AnyText:
    return content.upper()


def to_lower_case(content: AnyText) -> AnyText:
    return content.lower()


def to_title_case(content: AnyText) -> AnyText:
    """
    Convert text to title case: first character upper-case, the rest lower-case.

    Args:
        content: The text to convert.

    Returns:
        The converted text; empty input stays empty.

    Example:
        >>> to_title_case("fooBarBaz")
        'Foobarbaz'
    """
    return content[:1].upper() + content[1:].lower()


__all__ = [
    "to_upper_case",
    "to_lower_case",
    "to_title_case",
]
