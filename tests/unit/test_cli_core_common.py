# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import importlib.metadata
import unittest
from pathlib import Path
from unittest import mock

import typer

from athena.cli.core import common as common_module
from athena.core.errors import ArtifactInvalidError, InputNotFoundError


def _raise(exc: BaseException):
    def _fn():
        raise exc

    return _fn


class TestCliCoreCommon(unittest.TestCase):
    def test_run_cli_success_path(self) -> None:
        called: list[str] = []

        def _fn() -> None:
            called.append("ok")

        common_module._run_cli(_fn, debug=False)
        self.assertEqual(called, ["ok"])

    def test_run_cli_zero_result_does_not_exit(self) -> None:
        common_module._run_cli(lambda: 0, debug=False)

    def test_run_cli_nonzero_int_raises_typer_exit(self) -> None:
        with self.assertRaises(typer.Exit) as exc_info:
            common_module._run_cli(lambda: 7, debug=False)
        self.assertEqual(exc_info.exception.exit_code, 7)

    @mock.patch("athena.cli.core.common.console_err.print")
    def test_run_cli_reports_archive_errors(self, print_mock: mock.MagicMock) -> None:
        cases = (
            InputNotFoundError(Path("/missing")),
            ArtifactInvalidError("No files were processed", path=Path("x.tar"), reason="empty"),
            ValueError("boom"),
            PermissionError(13, "Permission denied"),
        )
        for exc in cases:
            with self.subTest(exc=type(exc).__name__):
                print_mock.reset_mock()
                with self.assertRaises(typer.Exit) as exc_info:
                    common_module._run_cli(_raise(exc), debug=False)
                self.assertEqual(exc_info.exception.exit_code, common_module.EXIT_FAILURE)
                print_mock.assert_called_once()
                self.assertIn(str(exc), str(print_mock.call_args.args[0]))

    @mock.patch("athena.cli.core.common.console_err.print")
    def test_run_cli_escapes_markup_in_messages(self, print_mock: mock.MagicMock) -> None:
        with self.assertRaises(typer.Exit):
            common_module._run_cli(_raise(ValueError("bad [bold]path[/bold]")), debug=False)
        self.assertIn(r"\[bold]", print_mock.call_args.args[0])

    @mock.patch("athena.cli.core.common.console_err.print")
    def test_run_cli_interrupt_exits_130(self, print_mock: mock.MagicMock) -> None:
        with self.assertRaises(typer.Exit) as exc_info:
            common_module._run_cli(_raise(KeyboardInterrupt()), debug=False)
        self.assertEqual(exc_info.exception.exit_code, common_module.EXIT_INTERRUPTED)
        self.assertIn("Interrupted", print_mock.call_args.args[0])

    def test_run_cli_debug_reraises(self) -> None:
        with self.assertRaises(LookupError):
            common_module._run_cli(_raise(LookupError("debug-error")), debug=True)

    @mock.patch("athena.cli.core.common.install_rich_traceback")
    def test_run_cli_debug_installs_traceback(
        self,
        install_rich_traceback: mock.MagicMock,
    ) -> None:
        common_module._run_cli(lambda: None, debug=True)
        install_rich_traceback.assert_called_once_with(show_locals=True)

    @mock.patch("athena.cli.core.common.importlib.metadata.version", return_value="1.2.3")
    def test_get_version_success(self, _version: mock.MagicMock) -> None:
        self.assertEqual(common_module._get_version(), "1.2.3")

    @mock.patch(
        "athena.cli.core.common.importlib.metadata.version",
        side_effect=importlib.metadata.PackageNotFoundError,
    )
    def test_get_version_fallback(self, _version: mock.MagicMock) -> None:
        self.assertEqual(common_module._get_version(), "0.0.0")


if __name__ == "__main__":
    unittest.main()
