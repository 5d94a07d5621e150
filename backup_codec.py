#!/usr/bin/env python3
"""Flat ``key=value`` snapshots of the global git identity."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from git_config import IDENTITY_KEYS, GitConfig
from git_operations import IoError

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]


def dumps(pairs: Iterable[Pair]) -> str:
    return "".join(f"{key}={value}\n" for key, value in pairs)


def loads(text: str) -> List[Pair]:
    """Parse backup text into (key, value) pairs in file order.

    A line is kept only when it holds exactly one ``=``. Values containing
    ``=`` cannot round-trip, so those lines are skipped instead of truncated.
    Only ``\\n`` (optionally preceded by ``\\r``) ends a line.
    """
    pairs: List[Pair] = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        if line.count("=") != 1:
            logger.debug("Skipping malformed backup line %d: %r", lineno, line)
            continue
        key, value = line.split("=", 1)
        pairs.append((key, value))
    return pairs


class BackupCodec:
    """Backs up and restores identity keys through a config bridge."""

    def __init__(self, bridge: Optional[GitConfig] = None, keys: Tuple[str, ...] = IDENTITY_KEYS) -> None:
        self.bridge = bridge if bridge is not None else GitConfig()
        self.keys = keys

    def snapshot(self) -> List[Pair]:
        """Return the tracked keys that currently have a value."""
        pairs: List[Pair] = []
        for key in self.keys:
            value = self.bridge.get(key)
            if value is not None:
                pairs.append((key, value))
        return pairs

    def backup(self, path: Path | str) -> List[Pair]:
        """Write the current identity to ``path``, overwriting it."""
        path = Path(path)
        pairs = self.snapshot()
        try:
            path.write_text(dumps(pairs), encoding="utf-8")
        except OSError as exc:
            raise IoError(f"Failed to write backup {path}", exc) from exc
        logger.info("Backed up %d key(s) to %s", len(pairs), path)
        return pairs

    def restore(self, path: Path | str) -> List[Pair]:
        """Apply every valid line of ``path`` in order; later duplicates win."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise IoError(f"Failed to read backup {path}", exc) from exc
        pairs = loads(text)
        for key, value in pairs:
            self.bridge.set(key, value)
        logger.info("Restored %d key(s) from %s", len(pairs), path)
        return pairs
