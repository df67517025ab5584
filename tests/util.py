"""Helpers for tests."""

from http.cookies import SimpleCookie
from typing import Optional

import httpx


def registration(**kwargs: str) -> dict:
    """Get registration form data, with ``kwargs`` replacing defaults."""
    data = {
        'name': 'A',
        'username': 'a1',
        'contact': '123',
        'email': 'a1@gmail.com',
        'password': 'p',
    }
    data.update(kwargs)
    return data


def set_cookie(response: httpx.Response, name: str = 'user') \
        -> Optional[SimpleCookie]:
    """Parse the Set-Cookie header for ``name``, if the response has one."""
    for header in response.headers.get_list('set-cookie'):
        cookie: SimpleCookie = SimpleCookie()
        cookie.load(header)
        if name in cookie:
            return cookie
    return None
