# tests/test_composition.py
import pytest
from crtperm import bcolors, RandomPermutation, Composition, compose, is_perm, rng_from_seed

SEED = b"composition"

def banner(s: str):
    print(f"\n{bcolors.OKBLUE}======== {s} ========{bcolors.ENDC}")

def _pair(n1: int, n2: int):
    rng = rng_from_seed(SEED)
    return RandomPermutation.with_rng(n1, rng), RandomPermutation.with_rng(n2, rng)

def test_compose_empty_fails():
    assert compose([]) is None

def test_compose_mismatched_sizes_fails():
    p1, p2 = _pair(300, 400)
    assert compose([p1, p2]) is None

def test_composition_constructor_checks_sizes():
    p1, p2 = _pair(300, 400)
    with pytest.raises(ValueError):
        Composition([p1, p2])
    with pytest.raises(ValueError):
        Composition([])
    assert Composition([p1, p1.inverse()]).num_points() == 300

def test_compose_order():
    p1, p2 = _pair(300, 300)
    comp = compose([p1, p2])
    assert isinstance(comp, Composition)
    assert comp.num_points() == 300
    for i in range(300):
        assert comp.nth(i) == p2.nth(p1.nth(i))
    assert is_perm(list(comp), 300)

def test_compose_single():
    p1, _ = _pair(300, 300)
    assert list(compose([p1])) == list(p1)

def test_compose_out_of_range():
    p1, p2 = _pair(300, 300)
    comp = compose([p1, p2])
    assert comp.nth(300) is None
    assert comp.nth(2 ** 64 - 1) is None

def test_compose_with_inverse_is_identity():
    p1, _ = _pair(2 ** 5 * 3 ** 3, 1)
    comp = compose([p1, p1.inverse()])
    assert list(comp) == list(range(p1.num_points()))

def test_composition_inverse():
    p1, p2 = _pair(300, 300)
    comp = compose([p1, p2, p1])
    inv = comp.inverse()
    for i in range(300):
        assert inv.nth(comp.nth(i)) == i

def main():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            banner(name)
            fn()
    print(f"{bcolors.BOLD}{bcolors.OKGREEN}All tests passed!{bcolors.ENDC}")

if __name__ == "__main__":
    main()
