"""Account store database models."""

import secrets
from datetime import datetime

from pytz import UTC
from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_user_id() -> str:
    """Generate a 24 hex digit record ID."""
    return secrets.token_hex(12)


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


class DBUser(Base):  # type: ignore
    """
    User accounts table.

    +---------------+--------------+------+-----+---------+
    | Field         | Type         | Null | Key | Default |
    +---------------+--------------+------+-----+---------+
    | id            | varchar(24)  | NO   | PRI | NULL    |
    | name          | varchar(255) | NO   |     | NULL    |
    | username      | varchar(255) | NO   | UNI | NULL    |
    | contact       | varchar(255) | NO   |     | NULL    |
    | email         | varchar(255) | NO   | UNI | NULL    |
    | password      | varchar(255) | NO   |     | NULL    |
    | profile_image | text         | NO   |     | ''      |
    | created_at    | datetime     | NO   |     | now     |
    +---------------+--------------+------+-----+---------+
    """

    __tablename__ = 'users'

    id = Column(String(24), primary_key=True, default=new_user_id)
    name = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False, unique=True)
    contact = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    profile_image = Column(Text, nullable=False, default='')
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<DBUser {self.username}>"
