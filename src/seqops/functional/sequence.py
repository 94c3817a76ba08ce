"""Eager higher-order operations over in-memory sequences.

This module provides the three classic list combinators, each as a single
independent left-to-right pass over an ordered, finite sequence:

    - **transform**: one output element per input element (map).
    - **select**: the input elements accepted by a predicate (filter).
    - **fold**: a single accumulated value (reduce).

``transform`` and ``select`` also come in index-aware flavours whose callback
receives the element's zero-based position in the sequence being traversed.

All operations are pure with respect to their input: the sequence is read,
never resized, reordered or mutated, and every call returns freshly allocated
storage. Callbacks run exactly once per element in ascending index order. An
exception raised by a callback propagates unchanged and no partial result is
returned.

Examples:
    >>> from seqops.functional.sequence import transform_indexed, select, fold
    >>>
    >>> ages = [22, 21, 21, 24, 18, 21]
    >>> select(ages, lambda age: age >= 21)
    [22, 21, 21, 24, 21]
    >>> transform_indexed(["a", "b"], lambda s, idx: f"{idx + 1}. {s}")
    ['1. a', '2. b']
    >>> fold(ages, lambda total, age: total + age)
    127
    >>> fold([], lambda total, age: total + age, product=float)
    0.0
"""

import typing as tp

from seqops.core.types import (
    IndexedPredicate,
    IndexedTransform,
    Item,
    Predicate,
    Product,
    ProductFactory,
    Reducer,
    Transform,
)

__all__ = [
    "transform",
    "transform_indexed",
    "select",
    "select_indexed",
    "fold",
]


def transform(
    values: tp.Sequence[Item], converter: Transform[Item, Product]
) -> tp.List[Product]:
    """Convert every element of a sequence.

    Args:
        values: The input sequence. May be empty.
        converter: Function applied to each element.

    Returns:
        A new list with ``converter(values[i])`` at position ``i``. Its length
        always equals ``len(values)``.
    """
    return [converter(value) for value in values]


def transform_indexed(
    values: tp.Sequence[Item], converter: IndexedTransform[Item, Product]
) -> tp.List[Product]:
    """Convert every element of a sequence together with its position.

    Args:
        values: The input sequence. May be empty.
        converter: Function called as ``converter(element, index)``.

    Returns:
        A new list with ``converter(values[i], i)`` at position ``i``.
    """
    return [converter(value, idx) for idx, value in enumerate(values)]


def select(
    values: tp.Sequence[Item], condition: Predicate[Item]
) -> tp.List[Item]:
    """Keep the elements that satisfy a condition.

    Args:
        values: The input sequence.
        condition: Predicate evaluated once per element.

    Returns:
        A new list of the accepted elements in their original relative order.
    """
    return [value for value in values if condition(value)]


def select_indexed(
    values: tp.Sequence[Item], condition: IndexedPredicate[Item]
) -> tp.List[Item]:
    """Keep the elements that satisfy a position-aware condition.

    The index handed to ``condition`` is the element's position in ``values``,
    not the position it would take in the result, so rejected elements still
    advance the counter.

    Args:
        values: The input sequence.
        condition: Predicate called as ``condition(element, index)``.

    Returns:
        A new list of the accepted elements in their original relative order.
    """
    return [value for idx, value in enumerate(values) if condition(value, idx)]


def fold(
    values: tp.Sequence[Item],
    reducer: Reducer[Product, Item],
    product: ProductFactory[Product] = int,
) -> Product:
    """Reduce a sequence to a single value.

    The accumulator starts as ``product()``, the default value of the product
    type, and is replaced by ``reducer(accumulator, element)`` for each element
    in order. There is no explicit seed: an empty sequence yields ``product()``.

    Args:
        values: The input sequence. May be empty.
        reducer: Function returning the updated accumulator.
        product: Type (or zero-argument factory) of the accumulator. Defaults to
            ``int``, i.e. a seed of ``0``.

    Returns:
        The accumulator after every element has been folded in.

    Examples:
        >>> fold(["a", "b", "c"], lambda acc, s: acc + s, product=str)
        'abc'
    """
    result = product()
    for value in values:
        result = reducer(result, value)

    return result
