import unittest
import logging
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from scramble.common import config, utils


class TestSetupLogger(unittest.TestCase):
    def test_single_handler(self):
        first = utils.setup_logger("TestLogger")
        second = utils.setup_logger("TestLogger")
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)

    def test_level_from_config(self):
        logger = utils.setup_logger("TestLevel")
        self.assertEqual(logger.level, logging.getLevelName(config.LOG_LEVEL))


if __name__ == '__main__':
    unittest.main()
