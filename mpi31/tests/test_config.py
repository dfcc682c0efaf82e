"""
Unit tests for MpiConfig and its environment overrides.
"""

import unittest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from mpi31.config import MpiConfig, DEFAULT_CONFIG
from mpi31.constants import KARATSUBA_THRESHOLD, KARATSUBA_MAX_DEPTH
from mpi31.errors import MpiRangeError


class TestMpiConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = MpiConfig()
        self.assertEqual(cfg.karatsuba_threshold, KARATSUBA_THRESHOLD)
        self.assertEqual(cfg.karatsuba_threshold, 32)
        self.assertEqual(cfg.karatsuba_max_depth, KARATSUBA_MAX_DEPTH)

    def test_from_env_empty(self):
        self.assertEqual(MpiConfig.from_env({}), MpiConfig())

    def test_from_env_overrides(self):
        cfg = MpiConfig.from_env({
            "MPI31_KARATSUBA_THRESHOLD": "8",
            "MPI31_KARATSUBA_MAX_DEPTH": "3",
        })
        self.assertEqual(cfg.karatsuba_threshold, 8)
        self.assertEqual(cfg.karatsuba_max_depth, 3)

    def test_from_env_blank_ignored(self):
        cfg = MpiConfig.from_env({"MPI31_KARATSUBA_THRESHOLD": ""})
        self.assertEqual(cfg.karatsuba_threshold, KARATSUBA_THRESHOLD)

    def test_from_env_not_integer(self):
        with self.assertRaises(MpiRangeError):
            MpiConfig.from_env({"MPI31_KARATSUBA_THRESHOLD": "many"})

    def test_validation(self):
        with self.assertRaises(MpiRangeError):
            MpiConfig(karatsuba_threshold=1)
        with self.assertRaises(MpiRangeError):
            MpiConfig(karatsuba_max_depth=-1)

    def test_to_dict_and_frozen(self):
        cfg = MpiConfig(karatsuba_threshold=16)
        self.assertEqual(cfg.to_dict(),
                         {"karatsuba_threshold": 16,
                          "karatsuba_max_depth": KARATSUBA_MAX_DEPTH})
        with self.assertRaises(AttributeError):
            cfg.karatsuba_threshold = 4

    def test_default_config_instance(self):
        self.assertIsInstance(DEFAULT_CONFIG, MpiConfig)


if __name__ == "__main__":
    unittest.main()
