"""Profile store persisted as a JSON document in the user's home directory."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from git_config import GitConfig
from git_operations import IoError, NotFound, ParseError
from git_profile import Profile

logger = logging.getLogger(__name__)

PROFILE_FILE = ".git_profiles.json"


def get_home() -> Path:
    """Allow overriding home for tests via GITUP_HOME."""
    env_home = os.environ.get("GITUP_HOME")
    return Path(env_home).expanduser() if env_home else Path.home()


class ProfileStore:
    """Manage named git identities.

    The file is re-read on every lookup and rewritten in full on every change.
    There is no locking: two processes calling ``create`` at once race and the
    last writer wins. Callers needing atomicity can wrap ``load``/``save``.
    """

    def __init__(self, path: Path | None = None, bridge: Optional[GitConfig] = None) -> None:
        """Initialize the store.

        Args:
            path: Path to the profile file. Defaults to ~/.git_profiles.json
            bridge: Config bridge used by ``use``. Defaults to the global git config.
        """
        if path is None:
            path = get_home() / PROFILE_FILE

        self.path = Path(path)
        self.bridge = bridge if bridge is not None else GitConfig()

    def load(self) -> Dict[str, Profile]:
        """Read every profile from disk.

        Returns:
            Mapping of profile name to profile; empty when the file does not exist

        Raises:
            IoError: The file exists but cannot be read
            ParseError: The file is not a valid profile document
        """
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise IoError(f"Failed to read profile file {self.path}", exc) from exc
        except UnicodeDecodeError as exc:
            raise ParseError(f"Failed to parse profile file {self.path}: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Failed to parse profile file {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ParseError(f"Failed to parse profile file {self.path}: expected a mapping")
        return {key: Profile.from_dict(key, value) for key, value in data.items()}

    def save(self, profiles: Dict[str, Profile]) -> None:
        """Overwrite the profile file with ``profiles``."""
        data = {key: profile.to_dict() for key, profile in profiles.items()}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        except OSError as exc:
            raise IoError(f"Failed to write profile file {self.path}", exc) from exc

    def create(self, profile_name: str, name: str, email: str) -> Profile:
        """Insert or replace a profile.

        Args:
            profile_name: Key the profile is stored under
            name: Value for user.name
            email: Value for user.email
        """
        profiles = self.load()
        profile = Profile(name=name, email=email)
        if profile_name in profiles:
            logger.info("Overwriting profile '%s'", profile_name)
        profiles[profile_name] = profile
        self.save(profiles)
        return profile

    def get(self, profile_name: str) -> Profile:
        profile = self.load().get(profile_name)
        if profile is None:
            raise NotFound(f"Profile not found: {profile_name}")
        return profile

    def use(self, profile_name: str) -> Profile:
        """Apply a stored profile to the global git identity."""
        profile = self.get(profile_name)
        self.bridge.configure_identity(profile.name, profile.email)
        logger.info("Switched to profile '%s'", profile_name)
        return profile
