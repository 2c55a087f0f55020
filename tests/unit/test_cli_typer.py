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

import os
import re
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from athena.cli import app
from athena.config.installer import DEFAULT_CONFIG_PATH, XDG_CONFIG_ENV
from tests.test_support import SAMPLE_TEXT, make_tree, read_members, temp_directory

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
STAMPED_TAR_RE = re.compile(r"^\d{12}-docs(_\d+)?\.tar$")


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def _invoke(self, args: list[str], *, input: str | None = None):
        result = self.runner.invoke(
            app,
            [*args, "--config", str(DEFAULT_CONFIG_PATH), "--no-color"],
            input=input,
        )
        return result, _strip_ansi(result.output)

    def test_info_commands(self) -> None:
        cases = (
            {"args": ["--help"], "contains": ("--src", "--dest", "--compress", "--upload")},
            {"args": ["--version"], "contains": ("athena",)},
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                result = self.runner.invoke(app, case["args"])
                self.assertEqual(result.exit_code, 0)
                output = _strip_ansi(result.output)
                for expected in case["contains"]:
                    self.assertIn(expected, output)

    def test_missing_required_options_is_usage_error(self) -> None:
        result = self.runner.invoke(app, ["-i", "somewhere"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("--dest", _strip_ansi(result.output))

    def test_archive_directory(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT, "b": "->a.txt"})
            out = tmp / "out"
            out.mkdir()

            result, output = self._invoke(["-i", str(root), "-o", str(out)])

            self.assertEqual(result.exit_code, 0, output)
            produced = list(out.iterdir())
            self.assertEqual(len(produced), 1)
            self.assertRegex(produced[0].name, STAMPED_TAR_RE)
            self.assertEqual(set(read_members(produced[0])), {"a.txt", "b"})
            self.assertIn("2 files processed", output)
            self.assertIn("Archive written to", output)
            self.assertIn("Archive summary", output)

    def test_compress_flag_writes_tgz(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT})
            out = tmp / "out"
            out.mkdir()

            result, output = self._invoke(["-i", str(root), "-o", str(out), "-c"])

            self.assertEqual(result.exit_code, 0, output)
            (produced,) = out.iterdir()
            self.assertEqual(produced.suffix, ".tgz")
            self.assertEqual(produced.read_bytes()[:2], b"\x1f\x8b")

    def test_nonexistent_input_fails(self) -> None:
        with temp_directory() as tmp:
            result, output = self._invoke(["-i", str(tmp / "nope"), "-o", str(tmp)])
            self.assertEqual(list(tmp.iterdir()), [])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Specified file or directory does not exist.", output)

    def test_missing_output_directory_declined(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT})
            out = tmp / "new" / "backups"

            result, output = self._invoke(["-i", str(root), "-o", str(out)], input="n\n")

            self.assertEqual(result.exit_code, 1)
            self.assertFalse((tmp / "new").exists())
        self.assertIn("Output directory does not exist", output)

    def test_missing_output_directory_eof_declines(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT})
            out = tmp / "backups"

            result, _output = self._invoke(["-i", str(root), "-o", str(out)], input="")

            self.assertEqual(result.exit_code, 1)
            self.assertFalse(out.exists())

    def test_missing_output_directory_confirmed(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT})
            out = tmp / "new" / "backups"

            result, output = self._invoke(["-i", str(root), "-o", str(out)], input="y\n")

            self.assertEqual(result.exit_code, 0, output)
            self.assertEqual(len(list(out.iterdir())), 1)

    def test_yes_flag_skips_prompt(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT})
            out = tmp / "backups"

            result, output = self._invoke(["-i", str(root), "-o", str(out), "--yes"])

            self.assertEqual(result.exit_code, 0, output)
            self.assertNotIn("Create it?", output)
            self.assertTrue(out.is_dir())

    def test_explicit_archive_file_name(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT})
            target = tmp / "snapshot.tar"

            result, output = self._invoke(["-i", str(root), "-o", str(target)])

            self.assertEqual(result.exit_code, 0, output)
            self.assertEqual(set(read_members(target)), {"a.txt"})

    def test_empty_directory_leaves_no_archive(self) -> None:
        with temp_directory() as tmp:
            root = tmp / "empty"
            root.mkdir()
            out = tmp / "out"
            out.mkdir()

            result, output = self._invoke(["-i", str(root), "-o", str(out)])

            self.assertEqual(result.exit_code, 1)
            self.assertEqual(list(out.iterdir()), [])
        self.assertIn("No files were processed", output)

    def test_upload_flag_warns_and_still_archives(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT})
            out = tmp / "out"
            out.mkdir()

            result, output = self._invoke(["-i", str(root), "-o", str(out), "-u"])

            self.assertEqual(result.exit_code, 0, output)
            self.assertIn("upload is not supported yet", output)
            self.assertEqual(len(list(out.iterdir())), 1)

    def test_quiet_hides_status_output(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT})
            out = tmp / "out"
            out.mkdir()

            result, output = self._invoke(["-i", str(root), "-o", str(out), "-q", "-v"])

            self.assertEqual(result.exit_code, 0, output)
            self.assertNotIn("Archive written to", output)
            self.assertNotIn("processed", output)

    def test_verbose_lists_resolved_paths(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "docs", {"a.txt": SAMPLE_TEXT})
            out = tmp / "out"
            out.mkdir()

            result, output = self._invoke(["-i", str(root), "-o", str(out), "-v"])

            self.assertEqual(result.exit_code, 0, output)
            self.assertIn("Input:", output)
            self.assertIn("Output:", output)
            self.assertIn("Writing", output)

    def test_init_config_creates_user_config(self) -> None:
        with temp_directory() as tmp:
            with mock.patch.dict(os.environ, {XDG_CONFIG_ENV: str(tmp)}):
                result = self.runner.invoke(app, ["--init-config"])
                again = self.runner.invoke(app, ["--init-config"])
            created = Path(tmp) / "athena" / "config.toml"
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(created.is_file())
        self.assertIn("User config ready", _strip_ansi(result.output))
        self.assertIn("already exists", _strip_ansi(again.output))


if __name__ == "__main__":
    unittest.main()
