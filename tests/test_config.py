import math
import os
from unittest import TestCase

from sdes.config import SEARCH_DEFAULTS, load_search_config, resolve_worker_count


class TestSearchConfig(TestCase):
    def test_defaults(self):
        config = load_search_config({})
        self.assertEqual(SEARCH_DEFAULTS['timeout'], config.timeout)
        self.assertEqual(60.0, config.timeout)
        self.assertIsNone(config.max_workers)

    def test_environment_overrides(self):
        config = load_search_config({'SDES_SEARCH_TIMEOUT': '2.5', 'SDES_MAX_WORKERS': '3'})
        self.assertEqual(2.5, config.timeout)
        self.assertEqual(3, config.max_workers)

    def test_empty_values_are_ignored(self):
        config = load_search_config({'SDES_SEARCH_TIMEOUT': '', 'SDES_MAX_WORKERS': ''})
        self.assertEqual(60.0, config.timeout)

    def test_malformed_values(self):
        for environ in ({'SDES_SEARCH_TIMEOUT': 'soon'}, {'SDES_SEARCH_TIMEOUT': '-1'}, {'SDES_SEARCH_TIMEOUT': 'nan'},
                        {'SDES_MAX_WORKERS': 'many'}, {'SDES_MAX_WORKERS': '0'}):
            with self.assertRaises(ValueError):
                load_search_config(environ)

    def test_infinite_timeout_is_allowed(self):
        self.assertEqual(math.inf, load_search_config({'SDES_SEARCH_TIMEOUT': 'inf'}).timeout)

    def test_resolve_worker_count(self):
        self.assertEqual(5, resolve_worker_count(5))
        self.assertEqual(max(1, os.cpu_count() or 1), resolve_worker_count(None))
        with self.assertRaises(ValueError):
            resolve_worker_count(0)
