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


import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from tests.test_support import (
    HELLO_BYTES,
    HELLO_TEXT,
    build_cli_env,
    normalize_output,
    sample_bytes,
)
from z85e import z85_extended
from z85e.cli import app


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self.env = build_cli_env()

    def _invoke(self, args: list[str], *, input: bytes | str | None = None, env=None):
        return self.runner.invoke(app, args, input=input, env=env or self.env)

    def test_root_info_commands(self) -> None:
        result = self._invoke(["--help"])
        self.assertEqual(result.exit_code, 0)
        for command in ("encode", "decode", "size", "config"):
            self.assertIn(command, result.output)

        result = self._invoke(["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("z85e", result.output.lower())

    def test_root_without_subcommand_references_help(self) -> None:
        result = self._invoke([])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("z85e --help", normalize_output(result.output))

    def test_encode_stdin(self) -> None:
        cases = (
            (["encode", "--strict", "-"], HELLO_BYTES, HELLO_TEXT + "\n"),
            (["encode"], HELLO_BYTES, HELLO_TEXT + "\n"),
            (["encode", "-"], b"\x01\x02\x03", "09c6\n"),
            (["encode", "--wrap", "4", "-"], HELLO_BYTES, "Hell\noWor\nld\n"),
        )
        for args, data, expected in cases:
            with self.subTest(args=args):
                result = self._invoke(args, input=data)
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertEqual(result.stdout, expected)

    def test_encode_empty_input_warns(self) -> None:
        result = self._invoke(["encode", "-"], input=b"")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("input is empty", normalize_output(result.output))

    def test_encode_strict_rejects_partial_group(self) -> None:
        result = self._invoke(["encode", "--strict", "-"], input=b"\x01\x02\x03")
        self.assertEqual(result.exit_code, 2)
        output = normalize_output(result.output)
        self.assertIn("multiple of 4", output)
        self.assertIn("--extended", output)

    def test_encode_rejects_both_variants(self) -> None:
        result = self._invoke(["encode", "--strict", "--extended", "-"], input=b"abcd")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("not both", normalize_output(result.output))

    def test_encode_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = str(Path(tmpdir) / "missing.bin")
            result = self._invoke(["encode", missing])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("input file not found", normalize_output(result.output))

    def test_encode_file_to_file(self) -> None:
        data = sample_bytes(37)
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "data.bin"
            target = Path(tmpdir) / "data.z85"
            source.write_bytes(data)
            result = self._invoke(["--quiet", "encode", str(source), "-o", str(target)])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(target.read_text(encoding="ascii"), z85_extended.encode(data) + "\n")

    def test_decode_stdin_ignores_whitespace(self) -> None:
        result = self._invoke(["decode", "-"], input="Hello\nWorld\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout_bytes, HELLO_BYTES)

    def test_decode_tail(self) -> None:
        result = self._invoke(["decode", "-"], input="HelloWorld033")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout_bytes, HELLO_BYTES + b"\x01\x02")

    def test_decode_length_errors(self) -> None:
        cases = (
            (["decode", "-"], "HelloW", ("cannot be 1", "truncated")),
            (["decode", "--strict", "-"], "09c6", ("multiple of 5", "--extended")),
        )
        for args, text, expected in cases:
            with self.subTest(args=args):
                result = self._invoke(args, input=text)
                self.assertEqual(result.exit_code, 2)
                output = normalize_output(result.output)
                for fragment in expected:
                    self.assertIn(fragment, output)

    def test_decode_check_rejects_non_alphabet(self) -> None:
        result = self._invoke(["decode", "--check", "-"], input="Hello~World")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("position 5", normalize_output(result.output))

    def test_decode_without_check_accepts_non_alphabet(self) -> None:
        result = self._invoke(["decode", "-"], input="Hello~Worl")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(len(result.stdout_bytes), 8)

    def test_decode_rejects_non_ascii(self) -> None:
        result = self._invoke(["decode", "-"], input="Helloéorld".encode("utf-8"))
        self.assertEqual(result.exit_code, 2)
        self.assertIn("not ASCII", normalize_output(result.output))

    def test_decode_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "out.bin"
            result = self._invoke(["decode", "-", "-o", str(target)], input=HELLO_TEXT)
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(target.read_bytes(), HELLO_BYTES)

    def test_size_command(self) -> None:
        cases = (
            (["size", "encode", "5"], 0, "7"),
            (["size", "decode", "7"], 0, "5"),
            (["size", "encode", "8", "--strict"], 0, "10"),
            (["size", "DECODE", "10", "--strict"], 0, "8"),
        )
        for args, exit_code, expected in cases:
            with self.subTest(args=args):
                result = self._invoke(args)
                self.assertEqual(result.exit_code, exit_code, result.output)
                self.assertEqual(normalize_output(result.output), expected)

    def test_size_command_errors(self) -> None:
        cases = (
            (["size", "decode", "6"], "cannot be 1"),
            (["size", "encode", "5", "--strict"], "multiple of 4"),
        )
        for args, fragment in cases:
            with self.subTest(args=args):
                result = self._invoke(args)
                self.assertEqual(result.exit_code, 2)
                self.assertIn(fragment, normalize_output(result.output))

        result = self._invoke(["size", "sideways", "4"])
        self.assertEqual(result.exit_code, 2)

    def test_config_prints_path(self) -> None:
        result = self._invoke(["--quiet", "config"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(normalize_output(result.output), self.env["Z85E_CONFIG"])

    def test_config_variant_strict(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "strict.toml"
            path.write_text('[codec]\nvariant = "strict"\n', encoding="utf-8")
            env = build_cli_env(str(path))

            result = self._invoke(["encode", "-"], input=b"\x01\x02\x03", env=env)
            self.assertEqual(result.exit_code, 2)

            result = self._invoke(
                ["--quiet", "encode", "--extended", "-"], input=b"\x01\x02\x03", env=env
            )
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(result.stdout, "09c6\n")

    def test_extended_override_of_strict_config_warns(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "strict.toml"
            path.write_text('[codec]\nvariant = "strict"\n', encoding="utf-8")
            env = build_cli_env(str(path))

            result = self._invoke(["encode", "--extended", "-"], input=b"\x01", env=env)
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("config prefers strict", normalize_output(result.output))

            result = self._invoke(["encode", "--extended", "-"], input=b"\x01")
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertNotIn("config prefers strict", normalize_output(result.output))

    def test_size_follows_config_variant(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "strict.toml"
            path.write_text('[codec]\nvariant = "strict"\n', encoding="utf-8")
            env = build_cli_env(str(path))

            encoded = self._invoke(["encode", "-"], input=b"\x01\x02\x03", env=env)
            sized = self._invoke(["size", "encode", "3"], env=env)
            self.assertEqual(encoded.exit_code, 2)
            self.assertEqual(sized.exit_code, 2)
            self.assertIn("multiple of 4", normalize_output(sized.output))

            result = self._invoke(["size", "encode", "8"], env=env)
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(normalize_output(result.output), "10")

            result = self._invoke(["size", "encode", "3", "--extended"], env=env)
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(normalize_output(result.output), "4")

            result = self._invoke(["size", "encode", "3", "--strict", "--extended"], env=env)
            self.assertEqual(result.exit_code, 2)
            self.assertIn("not both", normalize_output(result.output))

    def test_config_hints_when_user_config_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            env = {"XDG_CONFIG_HOME": tmpdir, "Z85E_CONFIG": ""}

            result = self._invoke(["config"], env=env)
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("z85e config --init", normalize_output(result.output))

            result = self._invoke(["config", "--init"], env=env)
            self.assertEqual(result.exit_code, 0, result.output)
            user_path = Path(tmpdir) / "z85e" / "config.toml"
            self.assertTrue(user_path.is_file())

            result = self._invoke(["config"], env=env)
            self.assertEqual(result.exit_code, 0, result.output)
            output = normalize_output(result.output)
            self.assertNotIn("--init", output)
            self.assertIn(str(user_path), output)

    def test_config_output_section(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "wrap.toml"
            path.write_text("[output]\nwrap = 5\nnewline = false\n", encoding="utf-8")
            result = self._invoke(["encode", "-"], input=HELLO_BYTES, env=build_cli_env(str(path)))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "Hello\nWorld")

    def test_invalid_config_reports_field(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bad.toml"
            path.write_text('[codec]\nvariant = "base64"\n', encoding="utf-8")
            result = self._invoke(["--config", str(path), "encode", "-"], input=b"abcd")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("codec.variant", normalize_output(result.output))


if __name__ == "__main__":
    unittest.main()
