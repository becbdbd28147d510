# crtperm/permutation.py
from typing import Optional, Sequence
import numpy as np
from .params import bcolors
from .crt import chinese_remainder
from .factor import factorize
from .shuffle import fisher_yates, make_sub_permutation, invert_table
from .utils import ensure_rng, rng_from_seed

def _as_index(x) -> int:
    if isinstance(x, bool) or not isinstance(x, (int, np.integer)):
        raise TypeError(f"{bcolors.FAIL}index must be int, got {type(x).__name__}{bcolors.ENDC}")
    return int(x)

# -----------------------------
# Lookup contract
# -----------------------------
class Permutation:
    """
    A bijection on [0, num_points()).

    Subclasses implement num_points() and nth(); nth() returns None for any
    index outside the domain instead of raising.
    """

    def num_points(self) -> int:
        raise NotImplementedError

    def nth(self, index: int) -> Optional[int]:
        raise NotImplementedError

    def iter(self) -> "PermutationIter":
        return PermutationIter(self)

    def __iter__(self):
        return self.iter()

class PermutationIter:
    """Lazy cursor over perm.nth(0), perm.nth(1), ... ; stops at the first None."""

    def __init__(self, perm: Permutation):
        self.perm = perm
        self.idx = 0

    def __iter__(self):
        return self

    def __next__(self) -> int:
        value = self.perm.nth(self.idx)
        self.idx += 1
        if value is None:
            raise StopIteration
        return value

    def skip(self, k: int) -> Optional[int]:
        """
        Move the cursor k places ahead and return the value there, with a single
        nth() call. The cursor stays on that value, so next() yields it again.
        """
        k = _as_index(k)
        if k < 0:
            raise ValueError(f"{bcolors.FAIL}skip count must be non-negative{bcolors.ENDC}")
        self.idx += k
        return self.perm.nth(self.idx)

# -----------------------------
# Random permutation (factor tables + CRT)
# -----------------------------
class RandomPermutation(Permutation):
    def __init__(self, num_points: int, sub_perms: Sequence[np.ndarray]):
        tables = []
        for t in sub_perms:
            t = np.array(t, copy=True)
            t.flags.writeable = False
            tables.append(t)
        moduli = tuple(len(t) for t in tables)
        product = 1
        for m in moduli:
            product *= m
        assert product == num_points, f"Sub-permutation sizes multiply to {product}, expected {num_points}"

        inverses = []
        for t in tables:
            inv = invert_table(t)
            inv.flags.writeable = False
            inverses.append(inv)

        self._num_points = num_points
        self._tables = tuple(tables)
        self._inverses = tuple(inverses)
        self._moduli = moduli

    @classmethod
    def with_rng(cls, n: int, rng) -> Optional["RandomPermutation"]:
        """
        Build a random permutation of [0, n) from `rng`, or None when n has a
        prime factor of 256 or more.

        Draw order: one pass to shuffle the order of the prime-power factors,
        then one pass per factor, in the shuffled order, over its table.
        """
        rng = ensure_rng(rng)
        factored = factorize(n)
        if factored is None:
            return None
        powers = factored.prime_powers()
        order = fisher_yates(list(range(len(powers))), rng)
        sub_perms = [make_sub_permutation(powers[i], rng) for i in order]
        return cls(n, sub_perms)

    @classmethod
    def new(cls, n: int) -> Optional["RandomPermutation"]:
        return cls.with_rng(n, np.random.default_rng())

    @classmethod
    def from_seed(cls, n: int, seed) -> Optional["RandomPermutation"]:
        return cls.with_rng(n, rng_from_seed(seed))

    @property
    def sub_permutations(self) -> tuple:
        return self._tables

    @property
    def moduli(self) -> tuple:
        return self._moduli

    def num_points(self) -> int:
        return self._num_points

    def nth(self, index: int) -> Optional[int]:
        index = _as_index(index)
        if not 0 <= index < self._num_points:
            return None
        remainders = []
        for table, pk in zip(self._tables, self._moduli):
            index, digit = divmod(index, pk)
            remainders.append(int(table[digit]))
        value = chinese_remainder(remainders, self._moduli)
        assert value is not None, f"CRT failed for moduli {self._moduli}; factors are not coprime"
        return value

    def inverse(self) -> "Inverse":
        return Inverse(self)

    def __eq__(self, other):
        if not isinstance(other, RandomPermutation):
            return NotImplemented
        return (self._num_points == other._num_points
                and self._moduli == other._moduli
                and all(np.array_equal(a, b) for a, b in zip(self._tables, other._tables)))

    def __hash__(self):
        return hash((self._num_points, self._moduli))

    def __repr__(self):
        return f"RandomPermutation(num_points={self._num_points}, moduli={self._moduli})"

# -----------------------------
# Inverse view
# -----------------------------
class Inverse(Permutation):
    def __init__(self, perm: RandomPermutation):
        self.perm = perm

    def num_points(self) -> int:
        return self.perm.num_points()

    def nth(self, value: int) -> Optional[int]:
        value = _as_index(value)
        if not 0 <= value < self.num_points():
            return None
        # Undo the CRT split per factor, then rebuild the mixed-radix index
        # starting from the most significant digit (last table).
        acc = 0
        for inv, pk in zip(reversed(self.perm._inverses), reversed(self.perm._moduli)):
            acc = acc * pk + int(inv[value % pk])
        return acc

    def inverse(self) -> RandomPermutation:
        return self.perm

    def __repr__(self):
        return f"Inverse({self.perm!r})"
