"""
Password hashing for the custom email/password login.

Uses PBKDF2-SHA256 through passlib. The stored hash string carries its own
salt and iteration count, so only one column is needed per user.
"""

from passlib.context import CryptContext

PBKDF2_ROUNDS = 100_000

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=PBKDF2_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh random salt."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    Malformed or unknown hash strings count as a mismatch.
    """
    if not password_hash:
        return False
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        return False
