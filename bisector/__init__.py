from . import config
from .bisectutil import (
    bisect_left, bisect_left_by, bisect_left_by_key, bisect_left_core,
    bisect_right, bisect_right_by, bisect_right_by_key, bisect_right_core)
from .indexwidth import BisectionOverflowError, IndexWidth, get_index_width
from .ordering import Ordering

__version__ = '0.1.0'
