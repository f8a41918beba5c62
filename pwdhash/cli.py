# pwdhash/cli.py
import logging
import os
import sys
from typing import List, Optional

from pwdhash.auth import (
    SaltGenerationError,
    generate_salt,
    hash_password,
    to_hex,
)
from pwdhash.config import setup_config, setup_logging

logger = logging.getLogger(__name__)

USAGE = "usage: pwdhash PASSWORD"


def write_password_line(password: bytes) -> None:
    """Echo the raw password bytes, whatever the stdout encoding."""
    sys.stdout.flush()
    sys.stdout.buffer.write(b'password = "' + password + b'"\n')
    sys.stdout.buffer.flush()


def main(argv: Optional[List[str]] = None) -> None:
    """Print a salted hash of the password given as the first argument.

    Always exits successfully, including when the salt could not be
    generated.
    """
    if argv is None:
        argv = sys.argv[1:]

    config = setup_config()
    setup_logging(config['log_level'])
    for error in config['errors']:
        logger.warning(error)

    if len(argv) <= 0:
        print(USAGE)
        return

    password = os.fsencode(argv[0])
    write_password_line(password)

    try:
        salt = generate_salt()
    except SaltGenerationError as e:
        # Not fatal: continue with the zero-padded partial salt.
        logger.warning(f"Salt generation failed: {e}")
        print(f"Failed to generate salt: {e}")
        salt = e.salt

    pwd_hash = hash_password(password, salt)

    print(f"pwdhash = {to_hex(pwd_hash)}")
    print(f"salt    = {to_hex(salt)}")


if __name__ == "__main__":
    sys.exit(main())
