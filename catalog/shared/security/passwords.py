"""
Password hashing.

Passwords are stored as ``pbkdf2_sha256$<iterations>$<salt>$<hash>`` using
PBKDF2-HMAC-SHA256 with a random salt. Plain-text passwords never reach
the database or the logs.
"""

import base64
import hashlib
import os

ALGORITHM = "pbkdf2_sha256"
ITERATIONS = 390_000
SALT_BYTES = 16


def hash_password(password: str, iterations: int = ITERATIONS) -> str:
    """Return a salted PBKDF2 hash of ``password``."""
    salt = base64.b64encode(os.urandom(SALT_BYTES)).decode("ascii")
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("ascii"), iterations)
    return f"{ALGORITHM}${iterations}${salt}${base64.b64encode(digest).decode('ascii')}"
