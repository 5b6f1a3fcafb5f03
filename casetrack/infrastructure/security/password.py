"""Password hashing for staff accounts.

bcrypt over a base64 SHA-256 digest of the password, so passwords longer
than bcrypt's 72-byte window are not silently truncated. Work factor comes
from settings.bcrypt_rounds.
"""

import base64
import hashlib

import bcrypt

from casetrack.core.config import get_settings


def _digest(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a bcrypt hash string for password."""
    salt = bcrypt.gensalt(rounds=rounds or get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_digest(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """True if password matches password_hash; malformed hashes never match."""
    try:
        return bool(bcrypt.checkpw(_digest(password), password_hash.encode("utf-8")))
    except (ValueError, TypeError):
        return False
