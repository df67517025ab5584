"""Functions for working with the session cookie.

The cookie value is the JSON object ``{"id": ..., "username": ...}`` of the
logged-in user. It is neither signed nor tracked on the server, so anyone who
can write the cookie can claim any identity; it relies on HttpOnly, Secure
and SameSite attributes alone.
"""

import json
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from .domain import SessionUser, User
from .exceptions import InvalidCookie


def pack(user: User) -> str:
    """Generate the session cookie value for a user."""
    return json.dumps({'id': user.user_id, 'username': user.username},
                      separators=(',', ':'))


def unpack(cookie: str) -> SessionUser:
    """
    Unpack the session cookie.

    Parameters
    ----------
    cookie : str
        The value of the session cookie.

    Returns
    -------
    :class:`SessionUser`

    Raises
    ------
    :class:`InvalidCookie`
        Raised if the cookie is not JSON, or does not carry both an ID and a
        username.

    """
    try:
        data = json.loads(cookie)
    except ValueError as e:
        raise InvalidCookie('Session cookie is not JSON') from e
    if not isinstance(data, dict):
        raise InvalidCookie('Session cookie is not an object')
    try:
        return SessionUser.model_validate(data)
    except PydanticValidationError as e:
        raise InvalidCookie('Session cookie is missing id or username') from e


def unpack_or_none(cookie: Optional[str]) -> Optional[SessionUser]:
    """Unpack the session cookie, or get None if it is absent."""
    if not cookie:
        return None
    return unpack(cookie)
