"""Global configuration for finite-element."""

import os

_TRUTHY = {"1", "true", "yes", "on"}

# ---------- Modulus validation ----------
# The modulus is assumed prime by the caller.  Set
# FINITE_ELEMENT_CHECK_PRIMALITY=1 to have every constructed element verify
# it (Miller-Rabin, see field.modular.is_probable_prime).
CHECK_PRIMALITY = os.environ.get("FINITE_ELEMENT_CHECK_PRIMALITY", "").strip().lower() in _TRUTHY

# ---------- Miller-Rabin witnesses ----------
# The first 13 primes make the test deterministic for n < 3.3 * 10**24.
MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
