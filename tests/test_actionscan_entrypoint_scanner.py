"""Tests the scanner collaborator."""

import os
import sys
import unittest

from actionscan.entrypoint import constants, helpers
from actionscan.entrypoint.exceptions import ProcessInvocationException
from actionscan.entrypoint.models import InvocationRequest, ResolvedConfig
from actionscan.entrypoint.scanner import Scanner, SubprocessScanner, build_arguments


class ActionScanEntrypointScanner(unittest.TestCase):
    """Tests the scanner collaborator."""

    def setUp(self):
        """Ensure the application is setup for testing."""
        pass

    def tearDown(self):
        """Ensure everything is torn down between tests."""
        pass

    def test_build_arguments_reference(self):
        """Ensures arguments are ordered as the scanner expects for 'reference'."""
        resolved = ResolvedConfig(
            path=constants.CANONICAL_CONFIG_PATH,
            strategy=constants.STRATEGY_REFERENCE,
        )

        self.assertListEqual(
            build_arguments(InvocationRequest(target="./repo"), resolved),
            ["./repo", "--config", "critical_dependencies.yaml"],
        )
        self.assertListEqual(
            build_arguments(InvocationRequest(target="./repo", strict=True), resolved),
            ["./repo", "--strict", "--config", "critical_dependencies.yaml"],
        )

    def test_build_arguments_copy(self):
        """Ensures arguments are ordered as the scanner expects for 'copy'."""
        resolved = ResolvedConfig(
            path=constants.CANONICAL_CONFIG_PATH,
            strategy=constants.STRATEGY_COPY,
            copied_from="custom.yaml",
        )

        self.assertListEqual(
            build_arguments(InvocationRequest(target="./repo"), resolved),
            ["./repo"],
        )
        self.assertListEqual(
            build_arguments(InvocationRequest(target="./repo", strict=True), resolved),
            ["--strict", "./repo"],
        )

    def test_abstract_scanner(self):
        """Ensures the base scanner cannot be executed."""
        with self.assertRaises(NotImplementedError):
            Scanner().execute(["./repo"])

    def test_subprocess_exit_code(self):
        """Ensures the exit code of the child process is returned verbatim."""
        scanner = SubprocessScanner(binary=sys.executable)

        self.assertEqual(
            scanner.execute(["-c", "import sys; sys.exit(0)"]).exit_code, 0
        )
        self.assertEqual(
            scanner.execute(["-c", "import sys; sys.exit(1)"]).exit_code, 1
        )
        self.assertEqual(
            scanner.execute(["-c", "import sys; sys.exit(100)"]).exit_code, 100
        )

    @unittest.skipIf(os.name != "posix", "Requires POSIX signals")
    def test_subprocess_signal(self):
        """Ensures a child terminated by a signal maps to a shell style status."""
        scanner = SubprocessScanner(binary=sys.executable)
        execution = scanner.execute(
            ["-c", "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"]
        )

        self.assertLess(execution.exit_code, 0)
        self.assertEqual(helpers.exit_status(execution.exit_code), 143)

    def test_subprocess_missing_binary(self):
        """Ensures a missing binary is distinct from a scanner reported failure."""
        scanner = SubprocessScanner(binary="actionscan-does-not-exist")

        with self.assertRaises(ProcessInvocationException):
            scanner.execute(["./repo"])

    def test_render_command(self):
        """Ensures commands are rendered so they can be pasted into a shell."""
        self.assertEqual(
            helpers.render_command("scanner", ["./my repo", "--strict"]),
            "scanner './my repo' --strict",
        )
