# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Utility functions for the query range package.

This module provides logging setup and re-exports the string helpers.
"""

import logging
import sys

# Re-export string utilities
from query_range.utils.string import (
    to_upper_case,
    to_lower_case,
    to_title_case,
)


def setup_logging(logging_level: str) -> None:
    """
    Configure logging for the entire application.

    Log records go to stderr so they never mix with text written to stdout.

    Args:
        logging_level: The logging level to use (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Raises:
        ValueError: If an invalid logging level is provided.
    """
    # Validate logging level
    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if logging_level.upper() not in valid_levels:
        raise ValueError(
            f"Invalid logging level: {logging_level}. Must be one of {valid_levels}"
        )

    numeric_level = getattr(logging, logging_level.upper())

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


__all__ = [
    # String utilities
    "to_upper_case",
    "to_lower_case",
    "to_title_case",
    # General utilities
    "setup_logging",
]
