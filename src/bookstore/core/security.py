"""Password hashing utilities."""

import bcrypt

from src.bookstore.runtime.context import get_config


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash ``password`` with bcrypt.

    Args:
        password: Plain-text password
        rounds: bcrypt cost factor (defaults to ``security.bcrypt_rounds``)

    Returns:
        The encoded hash, salt included
    """
    cost = rounds or get_config().security.bcrypt_rounds
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=cost)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash.

    Malformed hashes never verify.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
