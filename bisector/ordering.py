"""Three-way comparison results and comparator builders."""
from enum import IntEnum
from typing import Any, Callable


class Ordering(IntEnum):
    """How a sequence element relates to the query."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, result) -> 'Ordering':
        """Normalize a ``cmp``-style result (read by its sign) to an Ordering."""
        if result < 0:
            return cls.LESS
        if result > 0:
            return cls.GREATER
        return cls.EQUAL


Comparator = Callable[[Any], Any]


def compare_to(target: Any, reversed_order: bool=False) -> Comparator:
    """Build a comparator ordering each element against ``target``.

    Only ``<`` is used, to match the __lt__() logic in list.sort().
    With ``reversed_order`` the sequence is taken to be sorted descending.
    """
    if reversed_order:
        def compare(element):
            if target < element:
                return Ordering.LESS
            if element < target:
                return Ordering.GREATER
            return Ordering.EQUAL
    else:
        def compare(element):
            if element < target:
                return Ordering.LESS
            if target < element:
                return Ordering.GREATER
            return Ordering.EQUAL
    return compare


def compare_key_to(target_key: Any, key: Callable, reversed_order: bool=False) -> Comparator:
    """Like ``compare_to`` but projects every element through ``key`` first."""
    compare = compare_to(target_key, reversed_order)
    return lambda element: compare(key(element))
