import logging
from functools import lru_cache
from typing import NamedTuple, Union

import numpy as np

from . import config

logger = logging.getLogger(__name__)


class BisectionOverflowError(OverflowError):
    """An insertion index does not fit in the configured index width."""


class IndexWidth(NamedTuple):
    dtype: np.dtype
    max_count: int  # longest sequence that can be searched

    @property
    def max_index(self) -> int:
        """Largest position an element can occupy."""
        return self.max_count - 1


@lru_cache(maxsize=None)
def _resolve(dtype: np.dtype) -> IndexWidth:
    if dtype.kind not in 'iu':
        raise ValueError(f'Index dtype must be an integer type, got {dtype}.')
    width = IndexWidth(dtype, int(np.iinfo(dtype).max))
    logger.debug(f'Index width {dtype}: up to {width.max_count} elements')
    return width


def get_index_width(index_dtype: Union[str, np.dtype, type, None]=None) -> IndexWidth:
    """Return the index width for ``index_dtype``.

    Falls back to ``config.index_dtype`` when ``index_dtype`` is None.
    """
    if index_dtype is None:
        index_dtype = config.index_dtype
    return _resolve(np.dtype(index_dtype))


def check_length(length: int, width: IndexWidth):
    if length > width.max_count:
        logger.error(f'Sequence of length {length} exceeds index width {width.dtype}')
        raise BisectionOverflowError(
            f'Sequence of length {length} cannot be indexed with {width.dtype} '
            f'(at most {width.max_count} elements).')


def step_past(mid: int, width: IndexWidth) -> int:
    """Return ``mid + 1``, failing when it leaves the index width."""
    if mid >= width.max_index:
        logger.error(f'Insertion index {mid + 1} overflows index width {width.dtype}')
        raise BisectionOverflowError(
            f'Insertion index {mid + 1} is past the largest {width.dtype} index '
            f'{width.max_index}.')
    return mid + 1
