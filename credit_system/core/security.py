"""
Password hashing helpers.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a random 16-byte salt
per password. The stored form is ``<salt hex>$<hash hex>``.

No route authenticates customers yet; ``verify_password`` is the check a
login flow would call against the stored value.
"""

import hashlib
import hmac
import os

from credit_system.core.config import settings


def hash_password(password: str, iterations: int | None = None) -> str:
    """Hash a plain text password for storage."""
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        iterations or settings.password_hash_iterations,
    )
    return f"{salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str, iterations: int | None = None) -> bool:
    """Check a plain text password against a stored ``salt$hash`` value."""
    try:
        salt_hex, hash_hex = stored.split("$", 1)
        salt = bytes.fromhex(salt_hex)
    except ValueError:
        return False

    digest = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        iterations or settings.password_hash_iterations,
    )
    return hmac.compare_digest(digest.hex(), hash_hex)
