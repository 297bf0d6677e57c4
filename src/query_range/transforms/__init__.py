# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Named segment transforms.

The transforms here are plain, context-free functions, so applying one to the
bare query gives the same result as applying it to any occurrence of it.
"""

from query_range.transforms.factory import (
    TRANSFORM_REGISTRY,
    get_transform,
    list_available_transforms,
)

__all__ = [
    "TRANSFORM_REGISTRY",
    "get_transform",
    "list_available_transforms",
]
