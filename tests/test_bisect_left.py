import header
import numpy as np

from bisector import bisect_left


def test_bisect_left_empty():
    assert bisect_left([], 0) == 0
    assert bisect_left((), 'a') == 0


def test_bisect_left_singleton():
    b = [4]
    assert bisect_left(b, 3) == 0
    assert bisect_left(b, 4) == 0
    assert bisect_left(b, 5) == 1


def test_bisect_left():
    assert bisect_left([1, 1, 1, 2, 3], 1) == 0

    b = [1, 2, 4, 6, 8, 9]
    assert bisect_left(b, 5) == 3
    assert bisect_left(b, 6) == 3
    assert bisect_left(b, 7) == 4
    assert bisect_left(b, 8) == 4

    assert bisect_left([1, 2, 4, 5, 6, 8], 9) == 6

    b = [1, 2, 4, 6, 7, 8, 9]
    assert bisect_left(b, 6) == 3
    assert bisect_left(b, 5) == 3
    assert bisect_left(b, 8) == 5

    b = [1, 2, 4, 5, 6, 8, 9]
    assert bisect_left(b, 7) == 5
    assert bisect_left(b, 0) == 0


def test_bisect_left_duplicates():
    b = [1, 3, 3, 3, 7]
    expected = [0, 0, 1, 1, 4, 4, 4, 4, 5]
    for x, index in enumerate(expected):
        assert bisect_left(b, x) == index


def test_bisect_left_reversed_order():
    b = [7, 3, 3, 3, 1]
    assert bisect_left(b, 8, reversed_order=True) == 0
    assert bisect_left(b, 3, reversed_order=True) == 1
    assert bisect_left(b, 2, reversed_order=True) == 4
    assert bisect_left(b, 0, reversed_order=True) == 5


def test_bisect_left_ndarray():
    b = np.array([0.5, 1.0, 1.0, 2.5])
    assert bisect_left(b, 1.0) == 1
    assert bisect_left(b, np.float64(3.0)) == 4
    assert bisect_left(b, 1.0) == int(np.searchsorted(b, 1.0, side='left'))


def test_bisect_left_strings():
    words = ['apple', 'banana', 'banana', 'cherry']
    assert bisect_left(words, 'banana') == 1
    assert bisect_left(words, 'aardvark') == 0
    assert bisect_left(words, 'zucchini') == 4
