"""Local disk storage for uploaded files."""

import logging
import os
import re
import shutil
import time
from typing import BinaryIO

logger = logging.getLogger(__name__)

_EXTENSION = re.compile(r'^\.[A-Za-z0-9]{1,16}$')


class UploadStorage:
    """
    Stores uploaded files for one purpose (e.g. profile images).

    Files are written to ``<root>/<subdir>/`` and are reachable by clients at
    ``<url_prefix>/<subdir>/<filename>``.
    """

    def __init__(self, root: str, subdir: str,
                 url_prefix: str = '/uploads') -> None:
        self.root = root
        self.subdir = subdir
        self.url_prefix = url_prefix.rstrip('/')
        self.directory = os.path.join(root, subdir)

    def init(self) -> None:
        """Create the storage directory if it does not exist."""
        os.makedirs(self.directory, exist_ok=True)

    def save(self, stream: BinaryIO, original_filename: str) -> str:
        """
        Write ``stream`` to a new file and get its name.

        The name is the current time in milliseconds plus the extension of
        ``original_filename``. If that name is taken, a numeric suffix is
        added; an existing file is never overwritten.
        """
        self.init()
        extension = safe_extension(original_filename)
        stamp = str(int(time.time() * 1000))
        attempt = 0
        while True:
            suffix = f'-{attempt}' if attempt else ''
            filename = f'{stamp}{suffix}{extension}'
            path = os.path.join(self.directory, filename)
            try:
                f = open(path, 'xb')
            except FileExistsError:
                attempt += 1
                continue
            try:
                with f:
                    shutil.copyfileobj(stream, f)
            except Exception:
                os.remove(path)
                raise
            logger.debug('Stored upload %s', path)
            return filename

    def remove(self, filename: str) -> None:
        """Delete a stored file, if it exists."""
        try:
            os.remove(os.path.join(self.directory, os.path.basename(filename)))
        except FileNotFoundError:
            pass

    def exists(self, filename: str) -> bool:
        return os.path.isfile(os.path.join(self.directory, filename))

    def url_for(self, filename: str) -> str:
        """Get the public URL path of a stored file."""
        return f'{self.url_prefix}/{self.subdir}/{filename}'


def safe_extension(filename: str) -> str:
    """Get the extension of ``filename``, or '' if it is missing or odd."""
    _, extension = os.path.splitext(os.path.basename(filename or ''))
    if _EXTENSION.match(extension):
        return extension
    return ''
