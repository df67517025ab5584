"""Special pytest fixture configuration file.

This file automatically provides all fixtures defined in it to all
pytest tests in this directory and sub directories.
"""
import pytest

from fastapi.testclient import TestClient

from user_accounts.factory import create_app
from user_accounts.services.accounts import AccountStore, util
from user_accounts.services.uploads import UploadStorage

FRONTEND_ORIGIN = "https://games.example.org"

TEST_ROUNDS = 4
"""Lowest bcrypt cost, to keep the tests fast."""


@pytest.fixture
def engine():
    engine = util.engine_from_uri("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    _store = AccountStore(engine)
    _store.create_all()
    yield _store
    _store.drop_all()


@pytest.fixture
def upload_root(tmp_path):
    return str(tmp_path / "uploads")


@pytest.fixture
def profile_images(upload_root):
    storage = UploadStorage(upload_root, "profiles")
    storage.init()
    return storage


@pytest.fixture
def app(store, upload_root):
    return create_app(store,
                      UPLOAD_ROOT=upload_root,
                      CORS_ORIGINS=FRONTEND_ORIGIN,
                      BCRYPT_ROUNDS=TEST_ROUNDS)


@pytest.fixture
def client(app):
    """Returns a test client; https so that Secure cookies are sent back"""
    with TestClient(app, base_url="https://testserver") as client:
        yield client
