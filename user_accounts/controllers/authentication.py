"""
Controllers for registration, login, session check and logout.

A successful registration or login issues the session cookie; see
:mod:`user_accounts.cookies` for its format. There is no server-side
session, so logging out only clears the cookie.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from email_validator import EmailNotValidError, validate_email
from fastapi import status

from .. import cookies, passwords
from ..domain import UserRegistration
from ..exceptions import AuthError, ConflictError, InvalidCookie, \
    NotFoundError, ValidationError
from ..services.accounts import AccountStore
from . import ResponseData

logger = logging.getLogger(__name__)

REGISTRATION_FIELDS = ('name', 'username', 'contact', 'email', 'password')


def register(form_data: Mapping[str, Any], store: AccountStore,
             session_duration: int, allowed_domain: str = 'gmail.com',
             rounds: int = passwords.DEFAULT_ROUNDS) -> ResponseData:
    """
    Create a new account and log the user in.

    Parameters
    ----------
    form_data : Mapping
        Should include `name`, `username`, `contact`, `email` and `password`.
    store : :class:`.AccountStore`
    session_duration : int
        Lifetime of the session cookie, in seconds.
    allowed_domain : str
        Only e-mail addresses in this domain may register.
    rounds : int
        bcrypt cost factor.

    Returns
    -------
    dict
        ``{'success': True}`` plus the session cookie.
    int
        Status code.
    dict
        Headers to add to the response.

    """
    values = {key: _field(form_data, key) for key in REGISTRATION_FIELDS}
    if not all(values.values()):
        raise ValidationError('All fields required')

    email = values['email']
    if not is_valid_email(email, allowed_domain):
        logger.debug('Rejected registration e-mail %s', email)
        raise ValidationError('Only Gmail allowed')

    if store.find_by_email_or_username(email, values['username']):
        raise ConflictError('User already exists')

    registration = UserRegistration(
        name=values['name'],
        username=values['username'],
        contact=values['contact'],
        email=email,
        password=passwords.hash_password(values['password'], rounds)
    )
    # The store also rejects duplicates that slipped past the lookup above.
    user = store.create_user(registration)
    logger.info('Registered user %s', user.user_id)

    data = {
        'success': True,
        'cookies': {
            'session_cookie': (cookies.pack(user), session_duration)
        }
    }
    return data, status.HTTP_200_OK, {}


def login(form_data: Mapping[str, Any], store: AccountStore,
          session_duration: int) -> ResponseData:
    """Log a user in with e-mail and password."""
    email = _field(form_data, 'email')
    password = _field(form_data, 'password')

    user = store.find_by_email(email) if email else None
    if user is None:
        logger.debug('Login for unknown e-mail %s', email)
        raise NotFoundError('User not found')
    if not password:
        raise AuthError('Wrong password')
    passwords.check_password(password, user.password)

    logger.info('User %s logged in', user.user_id)
    data = {
        'success': True,
        'cookies': {
            'session_cookie': (cookies.pack(user), session_duration)
        }
    }
    return data, status.HTTP_200_OK, {}


def check(session_cookie: Optional[str]) -> ResponseData:
    """Report whether the request carries a session cookie."""
    try:
        user = cookies.unpack_or_none(session_cookie)
    except InvalidCookie as e:
        logger.warning('Could not parse session cookie: %s', e)
        return {'loggedIn': False}, status.HTTP_200_OK, {}
    data: Dict[str, Any] = {
        'loggedIn': user is not None,
        'user': user.model_dump() if user is not None else None
    }
    return data, status.HTTP_200_OK, {}


def logout() -> ResponseData:
    """Clear the session cookie."""
    data = {
        'success': True,
        'cookies': {
            'session_cookie': ('', 0)
        }
    }
    return data, status.HTTP_200_OK, {}


def is_valid_email(email: str, allowed_domain: str) -> bool:
    """True if ``email`` is a valid address ending in ``@allowed_domain``."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return email.endswith(f'@{allowed_domain}')


def _field(form_data: Mapping[str, Any], key: str) -> Optional[str]:
    value = form_data.get(key)
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value or None
    return None
