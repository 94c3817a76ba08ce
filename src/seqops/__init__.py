"""Sequence operations with a worked demonstration pipeline."""

from seqops.functional import (
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
