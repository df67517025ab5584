"""Core data structures for the user accounts service."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A user record from the account store."""

    user_id: str
    """Opaque ID of the record"""

    name: str
    username: str
    contact: str
    email: str

    password: str
    """bcrypt hash of the password, never the password itself"""

    profile_image: str = ''
    """File name of the stored profile image, or empty"""

    created_at: Optional[datetime] = None


class UserRegistration(BaseModel):
    """A request to register a new user, after validation."""

    name: str
    username: str
    contact: str
    email: str
    password: str
    """Already hashed"""


class SessionUser(BaseModel):
    """The identity carried in the session cookie."""

    # Numeric ids read as strings.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    username: str
