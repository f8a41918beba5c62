from pwdhash.auth import (
    DIGEST_SIZE,
    SALT_SIZE,
    SaltGenerationError,
    generate_salt,
    hash_password,
)

__all__ = [
    'DIGEST_SIZE',
    'SALT_SIZE',
    'SaltGenerationError',
    'generate_salt',
    'hash_password',
]
