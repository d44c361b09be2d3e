from .config import smooth_config
from .generate import generate_bounded, generate_with_primes, pratt
from .merge import merge_smooth
from .primes import is_prime, primes_up_to
from .result import ResultTag, SmoothInputError, SmoothOverflowError, SmoothResult
