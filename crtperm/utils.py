# crtperm/utils.py
import hashlib
import numpy as np
from .params import SEED_BYTES, bcolors

def shake(expand_bytes: int, *chunks: bytes) -> bytes:
    xof = hashlib.shake_256()
    for c in chunks:
        xof.update(len(c).to_bytes(2, 'big'))
        xof.update(c)
    return xof.digest(expand_bytes)

def rng_from_seed(seed) -> np.random.Generator:
    """
    Deterministic numpy Generator for a byte or text seed.

    The seed is expanded with SHAKE-256 so short or structured seeds still
    fill the generator's whole state.
    """
    if isinstance(seed, str):
        seed = seed.encode("utf-8")
    if not isinstance(seed, (bytes, bytearray)):
        raise TypeError(f"{bcolors.FAIL}seed must be bytes or str{bcolors.ENDC}")
    material = shake(SEED_BYTES, b"crtperm|rng", bytes(seed))
    return np.random.default_rng(np.frombuffer(material, dtype=np.uint32))

def ensure_rng(rng):
    if rng is None:
        return np.random.default_rng()
    if not callable(getattr(rng, "integers", None)):
        raise TypeError(f"{bcolors.FAIL}rng must provide integers(low, high){bcolors.ENDC}")
    return rng
