# Numeric width of insertion indices, given as a numpy integer dtype name.
# The width's maximum value bounds both the length of a searchable sequence
# and the largest index a bisection may produce.
# e.g. 'intp' (platform default, sys.maxsize on 64-bit), 'int32', 'uint16', 'uint8'
index_dtype: str = 'intp'
