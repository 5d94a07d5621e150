import subprocess
import unittest
from unittest import mock

from git_operations import CommandFailed, GitOperations, GitupError, IoError, NotFound, ParseError


def completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class GitOperationsTests(unittest.TestCase):
    def test_error_types_share_base(self) -> None:
        for cls in (CommandFailed, NotFound, IoError, ParseError):
            self.assertTrue(issubclass(cls, GitupError))

    def test_io_error_keeps_os_error(self) -> None:
        original = PermissionError(13, "Permission denied")
        exc = IoError("Failed to write", original)
        self.assertIs(exc.error, original)
        self.assertIn("Permission denied", str(exc))

    def test_run_maps_launch_failure(self) -> None:
        with mock.patch("git_operations.subprocess.run", side_effect=FileNotFoundError("git")):
            with self.assertRaises(CommandFailed) as ctx:
                GitOperations.run(["git", "--version"])
        self.assertIn("git", str(ctx.exception))

    def test_run_returns_non_zero_without_raising(self) -> None:
        with mock.patch("git_operations.subprocess.run", return_value=completed(1)):
            result = GitOperations.run(["git", "config", "--global", "user.name"])
        self.assertEqual(result.returncode, 1)

    def test_run_checked_raises_with_stderr(self) -> None:
        with mock.patch("git_operations.subprocess.run", return_value=completed(3, stderr="could not lock config file\n")):
            with self.assertRaises(CommandFailed) as ctx:
                GitOperations.run_checked(["git", "config", "--global", "user.name", "x"])
        message = str(ctx.exception)
        self.assertIn("git config --global user.name x", message)
        self.assertIn("could not lock config file", message)

    def test_run_git_prefixes_executable(self) -> None:
        with mock.patch("git_operations.subprocess.run", return_value=completed(0, stdout="ok\n")) as run:
            out = GitOperations.run_git(["status"], git="/usr/local/bin/git")
        self.assertEqual(out, "ok\n")
        self.assertEqual(run.call_args.args[0], ["/usr/local/bin/git", "status"])

    def test_command_ok(self) -> None:
        with mock.patch("git_operations.subprocess.run", return_value=completed(0)):
            self.assertTrue(GitOperations.command_ok(["brew", "--version"]))
        with mock.patch("git_operations.subprocess.run", return_value=completed(1)):
            self.assertFalse(GitOperations.command_ok(["brew", "--version"]))
        with mock.patch("git_operations.subprocess.run", side_effect=FileNotFoundError("brew")):
            self.assertFalse(GitOperations.command_ok(["brew", "--version"]))


if __name__ == "__main__":
    unittest.main()
