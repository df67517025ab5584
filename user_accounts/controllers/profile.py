"""Controllers for profile management."""

import logging
from typing import BinaryIO, Optional

from fastapi import status

from .. import cookies
from ..exceptions import AuthError, InvalidCookie, NotFoundError, \
    ValidationError
from ..services.accounts import AccountStore
from ..services.uploads import UploadStorage
from . import ResponseData

logger = logging.getLogger(__name__)


def upload_profile_image(session_cookie: Optional[str],
                         stream: Optional[BinaryIO],
                         filename: Optional[str],
                         store: AccountStore,
                         storage: UploadStorage) -> ResponseData:
    """
    Store a new profile image for the logged-in user.

    Nothing is written to ``storage`` unless the session cookie identifies an
    existing user.

    Parameters
    ----------
    session_cookie : str or None
        Value of the session cookie.
    stream : file-like or None
        Content of the uploaded file, or None if no file was sent.
    filename : str or None
        Name of the file on the client; only its extension is kept.
    store : :class:`.AccountStore`
    storage : :class:`.UploadStorage`

    Returns
    -------
    dict
        ``{'success': True, 'imageUrl': ...}``
    int
        Status code.
    dict
        Headers to add to the response.

    """
    try:
        session_user = cookies.unpack_or_none(session_cookie)
    except InvalidCookie as e:
        logger.warning('Could not parse session cookie: %s', e)
        session_user = None
    if session_user is None:
        raise AuthError('Not logged in', status.HTTP_401_UNAUTHORIZED)

    if stream is None:
        raise ValidationError('No file uploaded')

    if store.get_user_by_id(session_user.id) is None:
        raise NotFoundError('User not found')

    stored = storage.save(stream, filename or '')
    try:
        store.update_profile_image(session_user.id, stored)
    except Exception:
        storage.remove(stored)
        raise

    logger.info('Stored profile image %s for user %s', stored, session_user.id)
    data = {'success': True, 'imageUrl': storage.url_for(stored)}
    return data, status.HTTP_200_OK, {}
