"""Password hashing, verification and generation utilities"""
import secrets

import bcrypt

GENERATED_PASSWORD_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz23456789!@#$%"


def hash_password(password: str) -> str:
    """Hash a plain-text password with a fresh salt"""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored hash"""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        return False


def generate_password(length: int = 12) -> str:
    """Random password for accounts created on someone's behalf (no 0/O/1/l/I)"""
    return "".join(secrets.choice(GENERATED_PASSWORD_ALPHABET) for _ in range(length))
