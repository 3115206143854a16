"""
Password hashing.

Salted PBKDF2-HMAC-SHA256, encoded as
``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>``.
"""

import hashlib
import hmac
import secrets
from typing import Optional

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


def hash_password(password: str, iterations: int, salt: Optional[str] = None) -> str:
    """Encode `password` with a fresh random salt unless one is given."""
    salt = salt or secrets.token_hex(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), bytes.fromhex(salt), iterations)
    return f"{ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    """Constant-time check of `password` against an encoded hash."""
    try:
        algorithm, iterations, salt, _ = encoded.split("$")
        if algorithm != ALGORITHM:
            return False
        candidate = hash_password(password, int(iterations), salt)
    except (AttributeError, ValueError):
        return False
    return hmac.compare_digest(candidate, encoded)
