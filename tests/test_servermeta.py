import json
import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from modmeta.servermeta import dump_server_meta, get_default_server_meta


class TestDefaultServerMeta(unittest.TestCase):
    def test_plain_server(self):
        meta = get_default_server_meta("Example", "1.12.2")
        self.assertEqual(meta["meta"]["name"], "Example (Minecraft 1.12.2)")
        self.assertEqual(meta["meta"]["description"], "Example Running Minecraft 1.12.2")
        self.assertEqual(meta["meta"]["address"], "localhost:25565")
        self.assertFalse(meta["meta"]["mainServer"])
        self.assertNotIn("forge", meta)
        self.assertNotIn("liteloader", meta)
        self.assertEqual(meta["untrackedFiles"], [])

    def test_forge_and_liteloader(self):
        meta = get_default_server_meta("Example", "1.12.2", forge_version="14.23.5.2854", liteloader_version="1.12.2-SNAPSHOT")
        self.assertEqual(
            meta["meta"]["description"],
            "Example Running Minecraft 1.12.2 (Forge v14.23.5.2854) (Liteloader v1.12.2-SNAPSHOT)",
        )
        self.assertEqual(meta["forge"], {"version": "14.23.5.2854"})
        self.assertEqual(meta["liteloader"], {"version": "1.12.2-SNAPSHOT"})

    def test_dump_is_json(self):
        meta = get_default_server_meta("Example", "1.7.10")
        self.assertEqual(json.loads(dump_server_meta(meta)), meta)


if __name__ == '__main__':
    unittest.main()
