# crtperm/crt.py
from typing import Optional, Sequence

def egcd(a: int, b: int) -> tuple:
    if a == 0:
        return b, 0, 1
    gcd, x1, y1 = egcd(b % a, a)
    x = y1 - (b // a) * x1
    y = x1
    return gcd, x, y

def mod_inverse(a: int, m: int) -> Optional[int]:
    """Inverse of a modulo m via extended Euclid, or None if gcd(a, m) != 1."""
    g, x, _ = egcd(a % m, m)
    if g != 1:
        return None
    return x % m

def chinese_remainder(remainders: Sequence[int], moduli: Sequence[int]) -> Optional[int]:
    """
    Combine (remainder, modulus) pairs with pairwise-coprime moduli into the
    unique value in [0, prod(moduli)) that satisfies all of them.

    Returns None when the inputs differ in length or a modulus has no
    inverse (moduli not coprime).
    """
    if len(remainders) != len(moduli):
        return None

    product = 1
    for m in moduli:
        product *= m

    result = 0
    for r, m in zip(remainders, moduli):
        partial = product // m
        inv = mod_inverse(partial, m)
        if inv is None:
            return None
        result = (result + r * partial * inv) % product
    return result % product
