# crtperm/factor.py
from dataclasses import dataclass
from typing import Optional, Tuple
from .params import TRIAL_DIVISION_BOUND, bcolors

@dataclass(frozen=True)
class FactoredInteger:
    factors: Tuple[Tuple[int, int], ...]   # (prime, exponent), primes increasing

    @property
    def value(self) -> int:
        out = 1
        for p, k in self.factors:
            out *= p ** k
        return out

    def prime_powers(self) -> list:
        return [p ** k for p, k in self.factors]

def factorize(n: int) -> Optional[FactoredInteger]:
    """
    Split n into prime powers by trial division below TRIAL_DIVISION_BOUND.

    Powers of two are stripped by counting trailing zero bits, then every odd
    divisor 3, 5, ..., 253 is tried. Composite divisors never match because
    their prime factors were removed first. Returns None when n has a prime
    factor >= TRIAL_DIVISION_BOUND.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"{bcolors.FAIL}n must be int{bcolors.ENDC}")
    if n < 1:
        raise ValueError(f"{bcolors.FAIL}n must be >= 1, got {n}{bcolors.ENDC}")

    factors = []
    pow2 = (n & -n).bit_length() - 1
    if pow2:
        n >>= pow2
        factors.append((2, pow2))

    for p in range(3, TRIAL_DIVISION_BOUND - 1, 2):
        if n == 1:
            break
        count = 0
        while n % p == 0:
            count += 1
            n //= p
        if count:
            factors.append((p, count))

    if n != 1:
        return None
    return FactoredInteger(tuple(factors))
