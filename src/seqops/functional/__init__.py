"""Functional primitives for seqops.

This module provides the eager sequence combinators (transform, select and
fold) used throughout the project. Utilities are stateless and never mutate
their inputs so they can be composed into pipelines, each call feeding the
next.
"""

from seqops.functional.sequence import (
    transform,
    transform_indexed,
    select,
    select_indexed,
    fold,
)

__all__ = [
    "transform",
    "transform_indexed",
    "select",
    "select_indexed",
    "fold",
]
