"""Tests for :mod:`user_accounts.cookies`."""

import json
from unittest import TestCase

from user_accounts import cookies
from user_accounts.domain import User
from user_accounts.exceptions import InvalidCookie


class TestSessionCookie(TestCase):
    """The session cookie is the JSON of the user's id and username."""

    def setUp(self):
        self.user = User(user_id='65a1f0c2e4b0a1b2c3d4e5f6', name='A',
                         username='a1', contact='123', email='a1@gmail.com',
                         password='$2b$04$notarealhash')

    def test_pack(self):
        value = cookies.pack(self.user)
        self.assertEqual(json.loads(value),
                         {'id': '65a1f0c2e4b0a1b2c3d4e5f6', 'username': 'a1'})
        self.assertNotIn('password', value)

    def test_unpack(self):
        session_user = cookies.unpack(cookies.pack(self.user))
        self.assertEqual(session_user.id, self.user.user_id)
        self.assertEqual(session_user.username, 'a1')

    def test_unpack_not_json(self):
        with self.assertRaises(InvalidCookie):
            cookies.unpack('{not json')

    def test_unpack_not_an_object(self):
        for value in ('null', '[]', '"a1"', '42'):
            with self.assertRaises(InvalidCookie):
                cookies.unpack(value)

    def test_unpack_missing_fields(self):
        with self.assertRaises(InvalidCookie):
            cookies.unpack('{"id": "abc"}')
        with self.assertRaises(InvalidCookie):
            cookies.unpack('{"username": "a1"}')

    def test_unpack_or_none(self):
        self.assertIsNone(cookies.unpack_or_none(None))
        self.assertIsNone(cookies.unpack_or_none(''))
        self.assertEqual(
            cookies.unpack_or_none('{"id": "abc", "username": "a1"}').id,
            'abc'
        )

    def test_unpack_numeric_id(self):
        """A numeric id is read as its string form."""
        session_user = cookies.unpack('{"id": 123, "username": "a"}')
        self.assertEqual(session_user.id, '123')
        self.assertEqual(session_user.username, 'a')
