"""Integration with the account store.

All access to user records goes through :class:`AccountStore`. Each
operation runs in its own short-lived database session, so a store instance
can be shared by every request the server handles concurrently.
"""

import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm.session import Session

from ...domain import User, UserRegistration
from ...exceptions import ConflictError, NotFoundError, StoreUnavailable
from . import models, util

logger = logging.getLogger(__name__)


class AccountStore:
    """Typed CRUD operations on user records."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, autoflush=False)

    @classmethod
    def from_uri(cls, uri: str) -> 'AccountStore':
        return cls(util.engine_from_uri(uri))

    def create_all(self) -> None:
        """Create the users table if it is missing."""
        models.Base.metadata.create_all(self.engine)

    def drop_all(self) -> None:
        models.Base.metadata.drop_all(self.engine)

    def find_by_email_or_username(self, email: str,
                                  username: str) -> Optional[User]:
        """Get the user that has either this e-mail or this username."""
        try:
            with util.transaction(self._sessions) as session:
                db_user = session.query(models.DBUser) \
                    .filter(or_(models.DBUser.email == email,
                                models.DBUser.username == username)) \
                    .first()
                return _to_domain(db_user) if db_user else None
        except SQLAlchemyError as e:
            raise StoreUnavailable('Server error') from e

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            with util.transaction(self._sessions) as session:
                db_user = session.query(models.DBUser) \
                    .filter(models.DBUser.email == email) \
                    .first()
                return _to_domain(db_user) if db_user else None
        except SQLAlchemyError as e:
            raise StoreUnavailable('Server error') from e

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        try:
            with util.transaction(self._sessions) as session:
                db_user = session.get(models.DBUser, user_id)
                return _to_domain(db_user) if db_user else None
        except SQLAlchemyError as e:
            raise StoreUnavailable('Server error') from e

    def create_user(self, registration: UserRegistration) -> User:
        """
        Add a new user to the account store.

        Raises
        ------
        :class:`ConflictError`
            If the username or e-mail is already taken. This is decided by
            the unique indexes on the table, not by an earlier lookup.
        :class:`StoreUnavailable`
            On any other database failure.

        """
        try:
            with util.transaction(self._sessions) as session:
                db_user = models.DBUser(
                    name=registration.name,
                    username=registration.username,
                    contact=registration.contact,
                    email=registration.email,
                    password=registration.password,
                )
                session.add(db_user)
                session.commit()
                return _to_domain(db_user)
        except IntegrityError as e:
            logger.debug('Insert rejected for %s: %s', registration.username, e)
            raise ConflictError('User already exists') from e
        except SQLAlchemyError as e:
            raise StoreUnavailable('Server error') from e

    def update_profile_image(self, user_id: str, filename: str) -> User:
        """Set the profile image file name of a user."""
        try:
            with util.transaction(self._sessions) as session:
                db_user = _load_dbuser(user_id, session)
                db_user.profile_image = filename
                return _to_domain(db_user)
        except SQLAlchemyError as e:
            raise StoreUnavailable('Server error') from e


def _load_dbuser(user_id: str, session: Session) -> models.DBUser:
    db_user: Optional[models.DBUser] = session.get(models.DBUser, user_id)
    if db_user is None:
        raise NotFoundError('User not found')
    return db_user


def _to_domain(db_user: models.DBUser) -> User:
    return User(
        user_id=db_user.id,
        name=db_user.name,
        username=db_user.username,
        contact=db_user.contact,
        email=db_user.email,
        password=db_user.password,
        profile_image=db_user.profile_image or '',
        created_at=db_user.created_at
    )
