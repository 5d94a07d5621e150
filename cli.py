#!/usr/bin/env python3
"""Command-line front end: install git, set identity, manage profiles and backups."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from backup_codec import BackupCodec
from git_config import GitConfig
from git_operations import GitupError, NotFound
from installer import InstallerDispatch
from profile_store import ProfileStore


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage git installation, global identity and identity profiles.")
    parser.add_argument("--user", help="Value for user.name")
    parser.add_argument("--email", help="Value for user.email")
    parser.add_argument("--install", action="store_true", help="Install git if it is missing")
    parser.add_argument("--config", action="store_true", help="Set the global identity from --user and --email")
    parser.add_argument("--show-config", action="store_true", help="Print the global user.name and user.email")
    parser.add_argument("--list-profiles", action="store_true", help="List stored profiles")
    parser.add_argument("--create-profile", metavar="NAME", help="Save --user/--email as profile NAME")
    parser.add_argument("--use-profile", metavar="NAME", help="Apply profile NAME to the global identity")
    parser.add_argument("--backup", metavar="PATH", help="Write user.name/user.email to PATH")
    parser.add_argument("--restore", metavar="PATH", help="Apply the identity stored in PATH")
    parser.add_argument(
        "--profile-file",
        type=Path,
        default=None,
        help="Profile store location (default: ~/.git_profiles.json, or under $GITUP_HOME)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args(argv)
    if (args.config or args.create_profile) and not (args.user and args.email):
        parser.error("--config and --create-profile require both --user and --email")
    return args


def install_git(installer: InstallerDispatch) -> None:
    try:
        present = installer.is_installed()
    except NotFound:
        present = False
    if present:
        print("✅ Git is already installed.")
        return
    decision = installer.install()
    if decision is None:
        print("✅ Git is already installed.")
    else:
        print(f"✅ Git installed successfully with {decision.manager}.")


def show_config(bridge: GitConfig) -> None:
    name, email = bridge.identity()
    print(f"Git user.name: {name}" if name else "Git user.name is not set.")
    print(f"Git user.email: {email}" if email else "Git user.email is not set.")


def list_profiles(store: ProfileStore) -> None:
    profiles = store.load()
    if not profiles:
        print(f"No profiles in {store.path}")
        return
    print(f"📋 Profiles in {store.path}:")
    for key in sorted(profiles):
        profile = profiles[key]
        print(f"  {key:<20} {profile.name} <{profile.email}>")


def run(args: argparse.Namespace) -> None:
    bridge = GitConfig()
    store = ProfileStore(args.profile_file, bridge=bridge)
    codec = BackupCodec(bridge)

    if args.install:
        install_git(InstallerDispatch())
    if args.config:
        bridge.configure_identity(args.user, args.email)
        print("✅ Git configured successfully.")
    if args.show_config:
        show_config(bridge)
    if args.list_profiles:
        list_profiles(store)
    if args.create_profile:
        store.create(args.create_profile, args.user, args.email)
        print(f"✅ Profile '{args.create_profile}' created successfully.")
    if args.use_profile:
        store.use(args.use_profile)
        print(f"✅ Switched to profile '{args.use_profile}'.")
    if args.backup:
        codec.backup(args.backup)
        print(f"✅ Configuration backed up to '{args.backup}'.")
    if args.restore:
        codec.restore(args.restore)
        print(f"✅ Configuration restored from '{args.restore}'.")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except GitupError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
