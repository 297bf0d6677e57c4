# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Factory for named segment transforms.

This module provides a registry of example transforms and utility functions
to access and list them by name.
"""

import logging
from typing import Dict, List

from query_range.core import Transform
from query_range.reassembly import identity
from query_range.utils.string import to_lower_case, to_title_case, to_upper_case

logger = logging.getLogger(__name__)

# Registry of available transforms
TRANSFORM_REGISTRY: Dict[str, Transform] = {
    "identity": identity,
    "upper": to_upper_case,
    "lower": to_lower_case,
    "title": to_title_case,
}


def get_transform(name: str) -> Transform:
    """
    Get a transform by name.

    Args:
        name: The name of the transform to retrieve.

    Returns:
        Transform: The function mapping a segment to its replacement.

    Raises:
        ValueError: If the transform is not found in the registry.

    Example:
        >>> get_transform("upper")("needle")
        'NEEDLE'
    """
    if name not in TRANSFORM_REGISTRY:
        available = ", ".join(TRANSFORM_REGISTRY.keys())
        raise ValueError(f"Unknown transform '{name}'. Available: {available}")

    return TRANSFORM_REGISTRY[name]


def list_available_transforms() -> List[str]:
    """
    Get list of available transform names.

    Example:
        >>> list_available_transforms()
        ['identity', 'upper', 'lower', 'title']
    """
    return list(TRANSFORM_REGISTRY.keys())
