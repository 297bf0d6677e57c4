# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Constants for the query range package.

This module contains the iteration polarities, shift directions and the
offset limits used by the range utilities.
"""

import sys

# Polarity constants
# An iterator either walks the occurrences of the query or the text between them
MATCHES = "matches"
GAPS = "gaps"
all_polarities = [MATCHES, GAPS]

# Shift direction constants
UP = "up"
DOWN = "down"
all_directions = [UP, DOWN]

# Largest index any Python sequence can hold
MAX_OFFSET = sys.maxsize
MIN_OFFSET = 0
