"""
Password hashing helpers.

Passwords are hashed with PBKDF2‑HMAC‑SHA256 and a fresh 16‑byte random
salt per call.  The stored string records the algorithm, the iteration
count (work factor), the salt and the derived key, separated by ``$``::

    pbkdf2_sha256$100000$<salt hex>$<hash hex>

Because the iteration count travels with the hash, raising the work
factor in the settings does not invalidate existing passwords.
"""

import hashlib
import hmac
import os

from .config import settings


ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, iterations: int = 0) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    Parameters
    ----------
    password : str
        The plain text password to hash.
    iterations : int
        Work factor.  Defaults to ``settings.password_hash_iterations``.

    Returns
    -------
    str
        The encoded hash, see the module docstring for the format.
    """
    iterations = iterations or settings.password_hash_iterations
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{ALGORITHM}${iterations}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored hash string.

    Recomputes the PBKDF2 digest with the stored salt and iteration
    count and compares it in constant time.  A malformed stored value
    never verifies.
    """
    try:
        algorithm, iterations, salt_hex, hash_hex = hashed_password.split("$", 3)
        if algorithm != ALGORITHM:
            return False
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
        dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, int(iterations))
    except (AttributeError, ValueError):
        return False
    return hmac.compare_digest(dk, stored_hash)
