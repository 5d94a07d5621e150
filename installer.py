#!/usr/bin/env python3
"""Git installation via the host's package manager."""
from __future__ import annotations

import logging
import platform
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from git_operations import CommandFailed, GitOperations, NotFound

logger = logging.getLogger(__name__)

Probe = Callable[[Sequence[str]], bool]
Runner = Callable[[Sequence[str]], str]


@dataclass(frozen=True)
class ManagerOption:
    manager: str
    probe: Optional[Tuple[str, ...]]
    command: Tuple[str, ...]


@dataclass(frozen=True)
class InstallPlan:
    options: Tuple[ManagerOption, ...]
    missing_message: str = ""


@dataclass(frozen=True)
class InstallerDecision:
    system: str
    manager: str
    command: Tuple[str, ...]


# platform.system() -> package managers in order of preference.
# An option without a probe is the unconditional fallback.
INSTALL_TABLE: Dict[str, InstallPlan] = {
    "Darwin": InstallPlan(
        options=(
            ManagerOption("brew", ("brew", "--version"), ("brew", "install", "git")),
        ),
        missing_message="Homebrew is not installed. Please install Homebrew first.",
    ),
    "Linux": InstallPlan(
        options=(
            ManagerOption("pacman", ("pacman", "-V"), ("sudo", "pacman", "-S", "--noconfirm", "git")),
            ManagerOption("apt-get", None, ("sudo", "apt-get", "install", "-y", "git")),
        ),
    ),
    "Windows": InstallPlan(
        options=(
            ManagerOption("choco", ("choco", "--version"), ("choco", "install", "git", "-y")),
            ManagerOption("winget", ("winget", "--version"), ("winget", "install", "--id", "Git.Git", "--silent")),
        ),
        missing_message="Neither Chocolatey nor Winget is installed. Please install one of them first.",
    ),
}


def decide(system: str, probe: Probe) -> InstallerDecision:
    """Pick the install command for ``system`` given which managers answer ``probe``."""
    plan = INSTALL_TABLE.get(system)
    if plan is None:
        raise CommandFailed(f"OS not supported: {system or 'unknown'}")
    for option in plan.options:
        if option.probe is None or probe(option.probe):
            return InstallerDecision(system=system, manager=option.manager, command=option.command)
    raise CommandFailed(plan.missing_message)


class InstallerDispatch:
    """Detects git and installs it when missing."""

    def __init__(
        self,
        system: str | None = None,
        probe: Probe | None = None,
        runner: Runner | None = None,
        git: str = "git",
    ) -> None:
        self.system = system if system is not None else platform.system()
        self.probe = probe or GitOperations.command_ok
        self.runner = runner or GitOperations.run_checked
        self.git = git

    def is_installed(self) -> bool:
        """Return True if ``git --version`` succeeds; raise NotFound if git cannot be launched."""
        try:
            result = GitOperations.run([self.git, "--version"])
        except CommandFailed as exc:
            raise NotFound(f"{self.git} is not installed") from exc
        return result.returncode == 0

    def install(self) -> InstallerDecision | None:
        """Install git unless it already runs.

        Returns:
            The decision that was executed, or None when git was already present
        """
        if self.probe([self.git, "--version"]):
            logger.info("%s is already installed", self.git)
            return None
        decision = decide(self.system, self.probe)
        logger.info("Installing git with %s", decision.manager)
        self.runner(decision.command)
        return decision
