# crtperm/__init__.py
from .params import TRIAL_DIVISION_BOUND, DTYPE, bcolors
from .crt import egcd, mod_inverse, chinese_remainder
from .factor import FactoredInteger, factorize
from .utils import shake, rng_from_seed, ensure_rng
from .shuffle import fisher_yates, make_sub_permutation, invert_table, is_perm
from .permutation import Permutation, PermutationIter, RandomPermutation, Inverse
from .composition import Composition, compose

def construct(n: int, rng=None):
    return RandomPermutation.with_rng(n, rng)

def inverse(perm):
    return perm.inverse()

def iterate(perm) -> PermutationIter:
    return PermutationIter(perm)
