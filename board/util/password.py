"""Password hashing utilities (bcrypt)."""

import bcrypt

# bcrypt only looks at the first 72 bytes of a password and recent releases
# reject longer input, so the byte form is truncated explicitly.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as text (60 characters)
    """
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode(
        "ascii"
    )


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Args:
        password: Plaintext password
        password_hash: Stored bcrypt hash

    Returns:
        True if the password matches, False otherwise (malformed hashes included)
    """
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("ascii"))
    except ValueError:
        return False
