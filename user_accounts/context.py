"""Application context shared by request handlers."""

from dataclasses import dataclass

from fastapi import Request

from .services.accounts import AccountStore
from .services.uploads import UploadStorage


@dataclass
class AccountsContext:
    """Services built once by :func:`.create_app` and used by every route."""

    store: AccountStore
    profile_images: UploadStorage


def get_context(request: Request) -> AccountsContext:
    """Dependency for fastapi routes"""
    return request.app.extra['context']
