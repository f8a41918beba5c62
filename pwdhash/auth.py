# pwdhash/auth.py
import hashlib
import logging
import secrets
from typing import Optional, Union

logger = logging.getLogger(__name__)

DIGEST_SIZE = hashlib.sha256().digest_size
SALT_SIZE = DIGEST_SIZE


class SaltGenerationError(Exception):
    """Secure random source failed or returned a short buffer."""

    def __init__(self, salt: bytes, cause: Optional[BaseException] = None):
        self.salt = salt
        self.cause = cause
        super().__init__(str(cause) if cause is not None else "<nil>")


def generate_salt(size: int = SALT_SIZE) -> bytes:
    """Generate `size` bytes of salt from the OS secure random source.

    On failure, raises SaltGenerationError carrying whatever was read,
    zero-padded to `size`.
    """
    try:
        salt = secrets.token_bytes(size)
    except (OSError, NotImplementedError) as e:
        raise SaltGenerationError(bytes(size), e) from e

    if len(salt) != size:
        logger.debug(f"Short read from random source: {len(salt)} of {size} bytes")
        raise SaltGenerationError(salt[:size].ljust(size, b'\x00'))

    logger.debug(f"Generated {size} byte salt")
    return salt


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def xor_bytes(secret: bytearray, salt: bytes) -> bytearray:
    """XOR `salt` into `secret` in place and return it."""
    if len(secret) != len(salt):
        raise ValueError(f"Length mismatch: {len(secret)} != {len(salt)}")
    for i in range(len(secret)):
        secret[i] ^= salt[i]
    return secret


def hash_password(password: Union[str, bytes], salt: bytes) -> bytes:
    """Hash a password as sha256(sha256(password) XOR salt)."""
    if isinstance(password, str):
        password = password.encode('utf-8', 'surrogateescape')
    if len(salt) != SALT_SIZE:
        raise ValueError(f"Salt must be {SALT_SIZE} bytes (got {len(salt)})")

    secret = bytearray(sha256_digest(password))
    xor_bytes(secret, salt)
    pwd_hash = sha256_digest(bytes(secret))

    logger.debug("Computed salted password hash")
    return pwd_hash


def to_hex(value: bytes) -> str:
    return bytes(value).hex()
