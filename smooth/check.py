# input checks shared by merge_smooth and the generators
# failures raise SmoothInputError right away, nothing is generated

from typing import Iterable, List

from .primes import is_prime
from .result import SmoothInputError


def check_int(x, name: str):
    if isinstance(x, bool) or not isinstance(x, int):
        raise SmoothInputError('%s should be an integer, now %r' % (name, x))
    if x < 0:
        raise SmoothInputError('%s should not be negative, now %d' % (name, x))


def canonical_basis(primes: Iterable[int]) -> List[int]:
    '''distinct primes in ascending order, so ties are always scanned the same way'''
    basis = set()
    for p in primes:
        if isinstance(p, bool) or not isinstance(p, int) or not is_prime(p):
            raise SmoothInputError('%r is not a prime' % (p,))
        basis.add(p)
    if len(basis) == 0:
        raise SmoothInputError('primes should not be empty')
    return sorted(basis)
