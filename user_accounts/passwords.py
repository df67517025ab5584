"""Password hashing."""

import logging

import bcrypt

from .exceptions import AuthError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Generate a salted bcrypt hash of a password.

    bcrypt only looks at the first 72 bytes of the password; longer passwords
    are truncated to that length here, both when hashing and checking.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode('ascii')


def check_password(password: str, encrypted: str) -> bool:
    """Check a password against a bcrypt hash.

    Raises
    ------
    :class:`AuthError`
        If the password does not match, or the stored hash is unusable.

    """
    try:
        matches = bcrypt.checkpw(_encode(password), encrypted.encode('ascii'))
    except ValueError as e:
        logger.warning('Stored password hash is not a valid bcrypt hash')
        raise AuthError('Wrong password') from e
    if not matches:
        raise AuthError('Wrong password')
    return True


def _encode(password: str) -> bytes:
    return password.encode('utf-8')[:72]
