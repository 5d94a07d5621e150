#!/usr/bin/env python3
"""Module-level entry points over the default gitup components."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from backup_codec import BackupCodec
from git_config import GitConfig
from git_operations import CommandFailed, GitupError, IoError, NotFound, ParseError
from git_profile import Profile
from installer import InstallerDecision, InstallerDispatch
from profile_store import ProfileStore

__all__ = [
    "CommandFailed",
    "GitupError",
    "IoError",
    "NotFound",
    "ParseError",
    "backup",
    "configure",
    "create_profile",
    "get",
    "install",
    "is_installed",
    "restore",
    "set",
    "use_profile",
]


def is_installed() -> bool:
    return InstallerDispatch().is_installed()


def install() -> Optional[InstallerDecision]:
    return InstallerDispatch().install()


def get(key: str) -> Optional[str]:
    return GitConfig().get(key)


def set(key: str, value: str) -> None:
    GitConfig().set(key, value)


def configure(name: str, email: str) -> None:
    GitConfig().configure_identity(name, email)


def create_profile(profile_name: str, name: str, email: str, path: Path | None = None) -> Profile:
    return ProfileStore(path).create(profile_name, name, email)


def use_profile(profile_name: str, path: Path | None = None) -> Profile:
    return ProfileStore(path).use(profile_name)


def backup(path: Path | str) -> List[Tuple[str, str]]:
    return BackupCodec().backup(path)


def restore(path: Path | str) -> List[Tuple[str, str]]:
    return BackupCodec().restore(path)
