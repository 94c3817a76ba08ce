"""Reusable type definitions for the seqops package.

This module provides type variables, callback aliases and constrained types
that are shared between the sequence operations and the demonstration
program.

Type Aliases:
    Transform: Callable converting an element into a new value.
    IndexedTransform: Callable converting an element and its position.
    Predicate: Callable deciding whether an element is kept.
    IndexedPredicate: Callable deciding on an element and its position.
    Reducer: Callable folding an element into the accumulator.
    ProductFactory: Zero-argument callable producing the default accumulator.
    Roster: A list of Person objects with at least one element.
"""

import typing as tp
from typing import Annotated, List

import annotated_types as at

from seqops.core.models import Person

__all__ = [
    "Item",
    "Product",
    "Transform",
    "IndexedTransform",
    "Predicate",
    "IndexedPredicate",
    "Reducer",
    "ProductFactory",
    "Roster",
]

Item = tp.TypeVar("Item")
Product = tp.TypeVar("Product")

Transform = tp.Callable[[Item], Product]
IndexedTransform = tp.Callable[[Item, int], Product]
Predicate = tp.Callable[[Item], bool]
IndexedPredicate = tp.Callable[[Item, int], bool]
Reducer = tp.Callable[[Product, Item], Product]

# Types such as int, float, str and list are valid factories: int() == 0
ProductFactory = tp.Callable[[], Product]

# A list of Person objects with at least one element
Roster = Annotated[List[Person], at.MinLen(1)]
