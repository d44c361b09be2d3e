# fixed-width unsigned integers on top of python's unbounded int
# products are checked against 2^width-1 instead of wrapping around

from typing import Optional

from .result import SmoothInputError


def max_value(width: int) -> int:
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise SmoothInputError('width should be a positive integer, now %r' % (width,))
    return (1 << width) - 1


def fits(x: int, width: int) -> bool:
    return 0 <= x <= max_value(width)


def checked_mul(a: int, b: int, width: int) -> Optional[int]:
    '''return a*b, or None if it does not fit in width bits'''
    product = a * b
    if product > max_value(width):
        return None
    return product
