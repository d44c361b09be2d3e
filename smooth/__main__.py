'''
print smooth numbers from the command line

  python -m smooth -k 7 -n 100        first 100 7-smooth numbers
  python -m smooth -p 2 5 -n 10       first 10 numbers of the form 2^i * 5^j
  python -m smooth --pratt -n 1344    all 3-smooth numbers below 2^64
  python -m smooth -k 5 --all -i      all 5-smooth numbers below 2^64, with index
'''

import argparse
import sys

from .config import smooth_config
from .generate import generate_bounded, generate_with_primes, pratt
from .result import SmoothInputError, SmoothOverflowError


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='smooth', description='Print the first n smooth numbers in increasing order.')
    basis = p.add_mutually_exclusive_group(required=True)
    basis.add_argument('-k', type=int, help='smoothness bound, basis is every prime <= k')
    basis.add_argument('-p', '--primes', type=int, nargs='+', help='explicit basis of primes')
    basis.add_argument('--pratt', action='store_true', help='3-smooth numbers (Pratt sequence)')
    count = p.add_mutually_exclusive_group(required=True)
    count.add_argument('-n', type=int, help='how many numbers to print')
    count.add_argument('--all', action='store_true', help='print every number representable in the width')
    p.add_argument('--width', type=int, default=smooth_config['width'], help='integer width in bits (default %(default)s)')
    p.add_argument('-i', '--index', action='store_true', help='prefix each number with its 1-based index')
    p.add_argument('-v', '--verbose', action='store_true', help='print a summary line to stderr')
    return p


def main(argv=None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)
    n = sys.maxsize if args.all else args.n

    try:
        if args.pratt:
            res = pratt(n, args.width)
        elif args.primes is not None:
            res = generate_with_primes(args.primes, n, args.width)
        else:
            res = generate_bounded(args.k, n, args.width)
        values = res.expect()
    except (SmoothInputError, SmoothOverflowError) as err:
        print('smooth: %s' % err, file=sys.stderr)
        return 2

    for i, v in enumerate(values):
        if args.index:
            print('%5d: %d' % (i+1, v))
        else:
            print(v)

    if args.verbose or smooth_config['verbose']:
        print('smooth: %s at width %d' % (res, res.width), file=sys.stderr)
    if res.is_truncated() and not args.all:
        print('smooth: basis exhausted after %d of %d numbers at width %d' % (len(res), res.requested, res.width), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
