"""
Request controllers for the user accounts service.

Controllers take plain request data plus the services they need, and return
a ``(data, status_code, headers)`` tuple. Cookies that the route should set
are passed back under the ``cookies`` key of ``data``, as a mapping of cookie
key to ``(value, max_age)``. Failures are raised as
:class:`user_accounts.exceptions.AccountsError` subclasses.
"""

from typing import Tuple

ResponseData = Tuple[dict, int, dict]
