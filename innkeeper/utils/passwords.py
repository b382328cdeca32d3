"""
Password hashing for staff accounts.

Hashes are Argon2id encoded strings (``$argon2id$...``).
"""
from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, InvalidHashError
from argon2.low_level import Type

_hasher = PasswordHasher(time_cost=2, memory_cost=65536, parallelism=4, hash_len=32, type=Type.ID)


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, encoded_hash: str | None) -> bool:
    if not password or not encoded_hash:
        return False
    try:
        return _hasher.verify(encoded_hash, password)
    except (VerificationError, InvalidHashError):
        return False
