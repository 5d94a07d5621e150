"""Git global configuration access."""
from __future__ import annotations

import logging

from git_operations import CommandFailed, GitOperations

logger = logging.getLogger(__name__)

IDENTITY_KEYS = ("user.name", "user.email")


class GitConfig:
    """Reads and writes keys in git's global configuration scope.

    Every call shells out to git; nothing is cached, so the global config
    file stays the only source of truth.
    """

    def __init__(self, git: str = "git") -> None:
        self.git = git

    def get(self, key: str) -> str | None:
        """Return the global value for ``key``, or None when it is unset.

        git exits 1 for a missing key; any other failure means the config
        could not be read and raises CommandFailed.
        """
        cmd = [self.git, "config", "--global", key]
        result = GitOperations.run(cmd)
        if result.returncode == 1:
            return None
        if result.returncode != 0:
            stderr = result.stderr.strip() or result.stdout.strip()
            raise CommandFailed(f"{' '.join(cmd)} failed with status {result.returncode}: {stderr}")
        value = result.stdout.strip()
        return value or None

    def set(self, key: str, value: str) -> None:
        """Write ``key = value`` into the global scope."""
        GitOperations.run_git(["config", "--global", key, value], git=self.git)
        logger.info("Set global %s", key)

    def configure_identity(self, name: str, email: str) -> None:
        """Set user.name and user.email, in that order."""
        self.set("user.name", name)
        self.set("user.email", email)

    def identity(self) -> tuple[str | None, str | None]:
        """Return the configured (name, email)."""
        return self.get("user.name"), self.get("user.email")
