import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from git_operations import CommandFailed, IoError, NotFound, ParseError
from git_profile import Profile
from profile_store import PROFILE_FILE, ProfileStore
from tests.fakes import FakeGitConfig


class ProfileStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / PROFILE_FILE
        self.bridge = FakeGitConfig()
        self.store = ProfileStore(self.path, bridge=self.bridge)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_missing_file_is_empty_store(self) -> None:
        self.assertEqual(self.store.load(), {})
        self.assertFalse(self.path.exists())

    def test_create_then_overwrite_keeps_one_entry(self) -> None:
        self.store.create("work", "Jane Doe", "jane@co.com")
        self.assertEqual(list(json.loads(self.path.read_text())), ["work"])

        self.store.create("work", "Jane D.", "jane@co.com")
        data = json.loads(self.path.read_text())
        self.assertEqual(data, {"work": {"name": "Jane D.", "email": "jane@co.com"}})
        self.assertEqual(self.store.load(), {"work": Profile("Jane D.", "jane@co.com")})

    def test_create_keeps_other_profiles(self) -> None:
        self.store.create("work", "Jane Doe", "jane@co.com")
        self.store.create("home", "Jane", "jane@home.org")
        self.assertEqual(sorted(self.store.load()), ["home", "work"])

    def test_use_applies_identity(self) -> None:
        self.store.create("work", "Jane Doe", "jane@co.com")
        profile = self.store.use("work")
        self.assertEqual(profile, Profile("Jane Doe", "jane@co.com"))
        self.assertEqual(self.bridge.get("user.name"), "Jane Doe")
        self.assertEqual(self.bridge.get("user.email"), "jane@co.com")

    def test_use_unknown_profile(self) -> None:
        self.store.create("work", "Jane Doe", "jane@co.com")
        with self.assertRaises(NotFound):
            self.store.use("personal")
        self.assertEqual(self.bridge.values, {})

    def test_use_propagates_bridge_failure(self) -> None:
        self.store.create("work", "Jane Doe", "jane@co.com")
        self.bridge.fail_on = "user.email"
        with self.assertRaises(CommandFailed):
            self.store.use("work")

    def test_corrupt_file_is_parse_error(self) -> None:
        self.path.write_text("{not json")
        with self.assertRaises(ParseError):
            self.store.load()
        with self.assertRaises(ParseError):
            self.store.create("work", "Jane Doe", "jane@co.com")
        self.assertEqual(self.path.read_text(), "{not json")

    def test_non_utf8_file_is_parse_error(self) -> None:
        self.path.write_bytes('{"work": {"name": "Jérôme", "email": "j@co.com"}}'.encode("latin-1"))
        with self.assertRaises(ParseError):
            self.store.load()

    def test_wrong_shape_is_parse_error(self) -> None:
        self.path.write_text(json.dumps(["work"]))
        with self.assertRaises(ParseError):
            self.store.load()
        self.path.write_text(json.dumps({"work": {"name": "Jane"}}))
        with self.assertRaises(ParseError):
            self.store.load()

    def test_unwritable_location_is_io_error(self) -> None:
        blocker = Path(self._tmp.name) / "blocker"
        blocker.write_text("")
        store = ProfileStore(blocker / PROFILE_FILE, bridge=self.bridge)
        with self.assertRaises(IoError) as ctx:
            store.create("work", "Jane Doe", "jane@co.com")
        self.assertIsInstance(ctx.exception.error, OSError)

    def test_default_path_follows_gitup_home(self) -> None:
        with mock.patch.dict(os.environ, {"GITUP_HOME": self._tmp.name}):
            store = ProfileStore(bridge=self.bridge)
        self.assertEqual(store.path, self.path)


if __name__ == "__main__":
    unittest.main()
