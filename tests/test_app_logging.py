"""Tests for :mod:`user_accounts.app_logging`."""

import logging
from unittest import TestCase

from user_accounts import app_logging


class TestSetupLogger(TestCase):
    def setUp(self):
        self.root = logging.getLogger()
        self.level = self.root.level

    def tearDown(self):
        self.root.setLevel(self.level)

    def test_lower_case_level(self):
        """LOGLEVEL=info is accepted."""
        app_logging.setup_logger('info')
        self.assertEqual(self.root.level, logging.INFO)
        app_logging.setup_logger('debug')
        self.assertEqual(self.root.level, logging.DEBUG)

    def test_handler_installed_once(self):
        app_logging.setup_logger('INFO')
        app_logging.setup_logger('INFO')
        names = [h.get_name() for h in self.root.handlers]
        self.assertEqual(names.count('user_accounts_json'), 1)
