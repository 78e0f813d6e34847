"""Bisection algorithms.

Modified from <https://github.com/python/cpython/blob/main/Lib/bisect.py>

Every search is driven by a comparator telling how a probed element relates
to the query (see ``ordering.Ordering``). Indices are bounded by the width
configured in ``config.index_dtype``.
"""
from typing import Sequence, Callable, Literal, Optional

from .indexwidth import check_length, get_index_width, step_past
from .ordering import Ordering, compare_key_to, compare_to


def _bisect(
    sorted_data: Sequence,
    compare: Callable,
    side: Literal['left', 'right'],
    index_dtype: Optional[str]=None
) -> int:
    width = get_index_width(index_dtype)
    hi = len(sorted_data)
    check_length(hi, width)
    if hi == 0:
        return 0
    # Right bisection groups EQUAL with LESS, left bisection with GREATER.
    past = Ordering.EQUAL if side == 'left' else Ordering.GREATER
    lo = 0
    while lo < hi:
        mid = (lo + hi) // 2
        # lo <= mid < hi, so sorted_data[mid] is always in range.
        if Ordering.of(compare(sorted_data[mid])) < past:
            lo = step_past(mid, width)
        else:
            hi = mid
    return lo


def bisect_right_core(sorted_data: Sequence, compare: Callable, index_dtype: Optional[str]=None) -> int:
    """Return the index i such that every e in sorted_data[:i] compares LESS
    or EQUAL and every e in sorted_data[i:] compares GREATER.

    Raises:
        BisectionOverflowError: len(sorted_data) is the largest count the
            index width allows and the insertion point lies past its last
            element.
    """
    return _bisect(sorted_data, compare, 'right', index_dtype)


def bisect_left_core(sorted_data: Sequence, compare: Callable, index_dtype: Optional[str]=None) -> int:
    """Return the index i such that every e in sorted_data[:i] compares LESS
    and every e in sorted_data[i:] compares EQUAL or GREATER.

    EQUAL routes the search leftwards, so a run of equal elements never
    overflows the index width here; only a target beyond the last element of
    a maximal-length sequence does.
    """
    return _bisect(sorted_data, compare, 'left', index_dtype)


def bisect_right(
    sorted_data: Sequence,
    target: any,
    *,
    reversed_order: bool=False,
    index_dtype: Optional[str]=None
) -> int:
    """Return the index where to insert item x in list a, assuming a is sorted.

    The return value i is such that all e in a[:i] have e <= x, and all e in
    a[i:] have e > x.  So if x already appears in the list, a.insert(i, x) will
    insert just after the rightmost x already there.

    With reversed_order, a is sorted in descending order and the inequalities
    flip.
    """
    return bisect_right_core(sorted_data, compare_to(target, reversed_order), index_dtype)


def bisect_right_by_key(
    sorted_data: Sequence,
    target_key: any,
    key: Callable,
    *,
    reversed_order: bool=False,
    index_dtype: Optional[str]=None
) -> int:
    """Like ``bisect_right`` for a sequence sorted by ``key(e)``.

    ``key`` is called once for every probed element.
    """
    return bisect_right_core(
        sorted_data, compare_key_to(target_key, key, reversed_order), index_dtype)


def bisect_right_by(sorted_data: Sequence, compare: Callable, *, index_dtype: Optional[str]=None) -> int:
    """Rightmost insertion point for the target captured by ``compare``.

    ``compare(e)`` returns an ``Ordering`` (or a cmp-style int) telling how e
    relates to the target, consistently with the order of sorted_data.
    """
    return bisect_right_core(sorted_data, compare, index_dtype)


def bisect_left(
    sorted_data: Sequence,
    target: any,
    *,
    reversed_order: bool=False,
    index_dtype: Optional[str]=None
) -> int:
    """Return the index where to insert item x in list a, assuming a is sorted.

    The return value i is such that all e in a[:i] have e < x, and all e in
    a[i:] have e >= x.  So if x already appears in the list, a.insert(i, x) will
    insert just before the leftmost x already there.
    """
    return bisect_left_core(sorted_data, compare_to(target, reversed_order), index_dtype)


def bisect_left_by_key(
    sorted_data: Sequence,
    target_key: any,
    key: Callable,
    *,
    reversed_order: bool=False,
    index_dtype: Optional[str]=None
) -> int:
    return bisect_left_core(
        sorted_data, compare_key_to(target_key, key, reversed_order), index_dtype)


def bisect_left_by(sorted_data: Sequence, compare: Callable, *, index_dtype: Optional[str]=None) -> int:
    return bisect_left_core(sorted_data, compare, index_dtype)


if __name__ == '__main__':
    u = [0, 1, 2, 2, 3, 4]
    assert bisect_right(u, 2) == 4
    assert bisect_left(u, 2) == 2
    assert bisect_right(u[::-1], 2, reversed_order=True) == 4
