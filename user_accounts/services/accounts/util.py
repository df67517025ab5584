"""Helpers for connecting to the account store."""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, NoSuchModuleError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm.session import Session
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def engine_from_uri(uri: str, echo: bool = False) -> Engine:
    """Create an engine for ``uri``.

    SQLite connections are shared across the server's worker threads, and an
    in-memory SQLite database only exists for as long as its one connection.

    Raises
    ------
    ValueError
        If ``uri`` does not name a database that SQLAlchemy can connect to,
        e.g. a ``mongodb://`` URI left over in ``MONGODB_URI``.

    """
    try:
        url = make_url(uri)
        url.get_dialect()
    except (ArgumentError, NoSuchModuleError) as e:
        scheme = uri.split(':', 1)[0]
        raise ValueError(f'Not an SQLAlchemy database URI (scheme'
                         f' "{scheme}"); set DATABASE_URI') from e
    if url.get_backend_name() == 'sqlite':
        args = {"check_same_thread": False}
        if uri in ('sqlite://', 'sqlite:///:memory:'):
            return create_engine(uri, echo=echo, connect_args=args,
                                 poolclass=StaticPool)
        return create_engine(uri, echo=echo, connect_args=args)
    return create_engine(uri, echo=echo, pool_pre_ping=True)


@contextmanager
def transaction(factory: sessionmaker) -> Generator[Session, None, None]:
    """Context manager for database transaction."""
    session = factory()
    try:
        yield session
        # The caller may have explicitly committed already, in order to
        # implement exception handling logic. We only want to commit here if
        # there is anything remaining that is not flushed.
        if session.new or session.dirty or session.deleted:
            session.commit()
    except SQLAlchemyError as e:
        logger.warning('Database error, rolling back: %s', str(e))
        session.rollback()
        raise
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
