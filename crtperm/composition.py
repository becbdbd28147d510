# crtperm/composition.py
from typing import Optional, Sequence
from .params import bcolors
from .permutation import Permutation

def _shared_size(perms: Sequence[Permutation]) -> Optional[int]:
    if not perms:
        return None
    n = perms[0].num_points()
    if any(p.num_points() != n for p in perms):
        return None
    return n

class Composition(Permutation):
    """Applies perms[0], then perms[1], ... ; compose() returns None where this raises."""

    def __init__(self, perms: Sequence[Permutation]):
        perms = tuple(perms)
        if _shared_size(perms) is None:
            raise ValueError(f"{bcolors.FAIL}Composition needs a non-empty sequence of equal-size permutations{bcolors.ENDC}")
        self.perms = perms

    def num_points(self) -> int:
        return self.perms[0].num_points()

    def nth(self, index: int) -> Optional[int]:
        for perm in self.perms:
            index = perm.nth(index)
            if index is None:
                return None
        return index

    def inverse(self) -> "Composition":
        return Composition([p.inverse() for p in reversed(self.perms)])

    def __repr__(self):
        return f"Composition({list(self.perms)!r})"

def compose(perms: Sequence[Permutation]) -> Optional[Composition]:
    """None if `perms` is empty or the permutations differ in num_points()."""
    perms = tuple(perms)
    if _shared_size(perms) is None:
        return None
    return Composition(perms)
