'''
the two ways to pick a basis, both ending in merge_smooth
plus pratt, the 3-smooth special case with two hard-coded workers

generate_bounded(k, n): basis is every prime <= k
generate_with_primes(primes, n): basis is the given primes, deduplicated and sorted
pratt(n): same output as generate_with_primes([2, 3], n), without the general min scan
'''

from typing import Iterable, List, Optional

from .check import check_int
from .config import resolve_width
from .merge import merge_smooth
from .primes import primes_up_to
from .result import SmoothResult
from .uint import checked_mul, max_value


def generate_bounded(k: int, n: int, width: Optional[int] = None) -> SmoothResult:
    '''first n numbers with no prime factor exceeding k'''
    check_int(k, 'k')
    check_int(n, 'n')
    width = resolve_width(width)
    max_value(width)
    if k < 2:
        # no prime <= k, so 1 is the only k-smooth number
        return SmoothResult.finish([1][:n], n, width)
    return merge_smooth(primes_up_to(k), n, width)


def generate_with_primes(primes: Iterable[int], n: int, width: Optional[int] = None) -> SmoothResult:
    '''first n numbers whose prime factors are all in primes, merge_smooth checks the primes'''
    return merge_smooth(primes, n, width)


def pratt(n: int, width: Optional[int] = None) -> SmoothResult:
    '''
    numbers of the form 2^i * 3^j, also known as 3-smooth numbers, OEIS A003586
    they are the best known gap sequence for shellsort in the worst case
    '''
    check_int(n, 'n')
    width = resolve_width(width)
    max_value(width)
    if n <= 1:
        return SmoothResult.finish([1][:n], n, width)
    times_two = checked_mul(2, 1, width)
    times_three = checked_mul(3, 1, width)
    if times_two is None or times_three is None:
        return SmoothResult.overflowed(n, width)
    v: List[int] = [1]
    two = 0
    three = 0
    while len(v) < n:
        if times_two is not None and (times_three is None or times_two <= times_three):
            next_value = times_two
        elif times_three is not None:
            next_value = times_three
        else:
            break
        v.append(next_value)
        # equal case moves both, 6 = 2*3 = 3*2
        if times_two == next_value:
            two += 1
            times_two = checked_mul(2, v[two], width)
        if times_three == next_value:
            three += 1
            times_three = checked_mul(3, v[three], width)
    return SmoothResult.finish(v, n, width)
