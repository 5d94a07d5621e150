#!/usr/bin/env python3
"""Subprocess helpers and the error types shared by every gitup module."""
from __future__ import annotations

import logging
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)


class GitupError(Exception):
    """Raised for recoverable gitup errors."""


class CommandFailed(GitupError):
    """An external command could not be launched or exited non-zero."""


class NotFound(GitupError):
    """A required lookup (profile, executable) did not resolve."""


class IoError(GitupError):
    """A filesystem operation failed, or its contents were not valid text."""

    def __init__(self, message: str, error: OSError | UnicodeError) -> None:
        super().__init__(f"{message}: {error}")
        self.error = error


class ParseError(GitupError):
    """A persisted document could not be decoded."""


class GitOperations:
    """Thin wrappers around external command invocations."""

    @staticmethod
    def run(cmd: Sequence[str]) -> subprocess.CompletedProcess[str]:
        """Run a command and return the completed process; raise only if it cannot start."""
        logger.debug("Running command: %s", " ".join(cmd))
        try:
            return subprocess.run(
                list(cmd),
                check=False,
                text=True,
                errors="replace",
                capture_output=True,
            )
        except OSError as exc:
            raise CommandFailed(f"Failed to run command: {cmd[0]} ({exc})") from exc

    @staticmethod
    def run_checked(cmd: Sequence[str]) -> str:
        """Run a command and return stdout; raise on launch failure or non-zero exit."""
        result = GitOperations.run(cmd)
        if result.returncode != 0:
            stderr = result.stderr.strip() or result.stdout.strip()
            raise CommandFailed(f"{' '.join(cmd)} failed with status {result.returncode}: {stderr}")
        return result.stdout

    @staticmethod
    def run_git(args: Sequence[str], *, git: str = "git") -> str:
        """Run a git command and return stdout; raise on failure."""
        return GitOperations.run_checked([git, *args])

    @staticmethod
    def command_ok(cmd: Sequence[str]) -> bool:
        """Return True when the command starts and exits with status 0."""
        logger.debug("Probing command: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                list(cmd),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError:
            return False
        return result.returncode == 0
