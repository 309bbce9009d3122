import logging
import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from modmeta.utils import (
    MinecraftVersion,
    capitalize,
    console,
    is_version_acceptable,
    setup_logging,
    strip_extension,
)
from rich.logging import RichHandler


class TestMinecraftVersion(unittest.TestCase):
    def test_parse(self):
        self.assertEqual(MinecraftVersion.from_string("1.12.2"), MinecraftVersion(1, 12, 2))
        self.assertEqual(str(MinecraftVersion.from_string("1.12")), "1.12")

    def test_rejects_snapshots(self):
        for value in ("20w14a", "1.12.2-pre1", "1", "latest"):
            with self.assertRaises(ValueError):
                MinecraftVersion.from_string(value)

    def test_acceptable(self):
        self.assertTrue(is_version_acceptable(MinecraftVersion(1, 7, 10), [7, 8]))
        self.assertFalse(is_version_acceptable(MinecraftVersion(2, 7), [7, 8]))


class TestStringHelpers(unittest.TestCase):
    def test_capitalize(self):
        self.assertEqual(capitalize("jei"), "Jei")
        self.assertEqual(capitalize(""), "")

    def test_strip_extension(self):
        self.assertEqual(strip_extension("mod-1.0.jar"), "mod-1.0")
        self.assertEqual(strip_extension("mod"), "mod")
        self.assertEqual(strip_extension(".jar"), ".jar")


class TestSetupLogging(unittest.TestCase):
    def tearDown(self):
        logger = logging.getLogger("modmeta")
        logger.handlers = []
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    def test_installs_rich_handler_on_package_logger(self):
        setup_logging(logging.DEBUG)
        logger = logging.getLogger("modmeta")
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], RichHandler)
        self.assertIs(logger.handlers[0].console, console)
        self.assertEqual(logger.level, logging.DEBUG)


if __name__ == '__main__':
    unittest.main()
