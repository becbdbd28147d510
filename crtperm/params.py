import numpy as np

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    OKBLUE = '\033[94m'
    OKGREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

# Trial division stops below this bound; n with a larger prime factor is rejected.
TRIAL_DIVISION_BOUND = 256
DTYPE = np.int64
SEED_BYTES = 32
