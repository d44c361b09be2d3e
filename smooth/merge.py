'''
return the first n numbers whose prime factors are all in basis, in increasing order
this is exercise 3.56 (2, 3, 5 only) generalized to any basis of primes

each prime has a worker, which knows the position in result it multiplies next
so the worker's value is the smallest multiple of its prime not emitted yet
the minimum over all workers is then the smallest smooth number not emitted yet

a value like 6 = 2*3 = 3*2 is proposed by several workers at once
all of them must move past it together, otherwise it shows up again later

products are checked against the integer width
a worker whose next product overflows is exhausted, it stays exhausted because result only grows
the others may still produce smaller terms, so we keep going until all are exhausted
'''

from typing import Iterable, List, Optional, TypedDict

from .check import canonical_basis, check_int
from .config import resolve_width
from .result import SmoothResult
from .uint import checked_mul, fits, max_value


class PrimeWorker(TypedDict):
    prime: int
    pos: int
    value: Optional[int]  # None when exhausted


def merge_smooth(basis: Iterable[int], n: int, width: Optional[int] = None) -> SmoothResult:
    check_int(n, 'n')
    primes = canonical_basis(basis)
    width = resolve_width(width)
    max_value(width)
    if n <= 1:
        return SmoothResult.finish([1][:n], n, width)
    # a prime wider than the integer type cannot make even the second term
    if not all(fits(p, width) for p in primes):
        return SmoothResult.overflowed(n, width)
    result = [1]
    workers: List[PrimeWorker] = [{'prime': p, 'pos': 0, 'value': p} for p in primes]
    while len(result) < n:
        # find min among live workers
        next_value: Optional[int] = None
        for w in workers:
            if w['value'] is not None and (next_value is None or w['value'] < next_value):
                next_value = w['value']
        if next_value is None:
            break
        result.append(next_value)
        # advance every worker that proposed next_value
        for w in workers:
            if w['value'] == next_value:
                w['pos'] += 1
                w['value'] = checked_mul(w['prime'], result[w['pos']], width)
    return SmoothResult.finish(result, n, width)
