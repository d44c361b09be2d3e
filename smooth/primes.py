# the prime source: every prime up to a bound, in ascending order
# plain sieve of eratosthenes for the bound, the bounds used here are small
# is_prime checks caller-supplied primes, which may be as wide as the integer type

from typing import List


def primes_up_to(k: int) -> List[int]:
    '''all primes p with p <= k, k itself included if prime'''
    if k < 2:
        return []
    composite = [False] * (k+1)
    primes: List[int] = []
    for i in range(2, k+1):
        if composite[i]:
            continue
        primes.append(i)
        for multiple in range(i*i, k+1, i):
            composite[multiple] = True
    return primes


def is_prime(x: int) -> bool:
    '''trial division below 2^32, miller-rabin above'''
    if x < 2:
        return False
    if x % 2 == 0:
        return x == 2
    if x >= 1 << 32:
        return _miller_rabin(x)
    d = 3
    while d * d <= x:
        if x % d == 0:
            return False
        d += 2
    return True


# exact for every x < 2^64
_BASES_64 = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)
# exact below 3.3*10^24, a strong probable prime test beyond that
_BASES_WIDE = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def _miller_rabin(x: int) -> bool:
    d = x - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    bases = _BASES_64 if x < 1 << 64 else _BASES_WIDE
    for a in bases:
        a %= x
        if a == 0:
            continue
        y = pow(a, d, x)
        if y == 1 or y == x-1:
            continue
        for _ in range(s-1):
            y = y * y % x
            if y == x-1:
                break
        else:
            return False
    return True
