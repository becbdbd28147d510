import numpy as np
from .params import DTYPE

# -----------------------------
# Shuffle
# -----------------------------
def fisher_yates(items: list, rng) -> list:
    """
    In-place Fisher-Yates pass: for a = 0, 1, ..., position a is swapped with
    one scalar draw rng.integers(a, len(items)).
    """
    count = len(items)
    for a in range(count):
        b = int(rng.integers(a, count))
        items[a], items[b] = items[b], items[a]
    return items

def make_sub_permutation(size: int, rng) -> np.ndarray:
    table = fisher_yates(list(range(size)), rng)
    return np.array(table, dtype=DTYPE)

def invert_table(table: np.ndarray) -> np.ndarray:
    inv = np.empty_like(table)
    inv[table] = np.arange(len(table), dtype=table.dtype)
    return inv

def is_perm(values, n: int) -> bool:
    arr = np.asarray(values, dtype=DTYPE)
    if arr.shape != (n,):
        return False
    if n == 0:
        return True
    if arr.min() < 0 or arr.max() >= n:
        return False
    return bool(np.all(np.bincount(arr, minlength=n) == 1))
