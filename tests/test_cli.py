"""
Tests for the command-line entry point and GitHub Actions output.
"""

import contextlib
import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from update_webhooks.cli import main, parse_args, write_github_output
from update_webhooks.utils.log import log


SERVICE = """
service: test-service
x-update-webhooks:
  - https://example.com/webhook1
  - not-a-valid-url
  - https://webhook.site/123456
"""

_CLEAN_ENV = {"GITHUB_ACTIONS": "", "GITHUB_OUTPUT": "", "INPUT_FILE": ""}


class _CliTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)
        env = patch.dict(os.environ, _CLEAN_ENV)
        env.start()
        self.addCleanup(env.stop)

    def tearDown(self):
        for handler in list(log.handlers):
            handler.close()
        log.handlers.clear()
        self._tmp.cleanup()

    def write(self, name, text):
        path = self.tmpdir / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    def run_main(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()


class TestParseArgs(_CliTestCase):
    def test_positional_file(self):
        args = parse_args(["service.yml"])
        self.assertEqual(args.file, "service.yml")
        self.assertEqual(args.output_name, "webhooks")
        self.assertFalse(args.debug)

    def test_file_from_action_input(self):
        with patch.dict(os.environ, {"INPUT_FILE": "from-env.yml"}):
            self.assertEqual(parse_args([]).file, "from-env.yml")

    def test_positional_overrides_action_input(self):
        with patch.dict(os.environ, {"INPUT_FILE": "from-env.yml"}):
            self.assertEqual(parse_args(["cli.yml"]).file, "cli.yml")

    def test_missing_file_is_usage_error(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                parse_args([])
        self.assertEqual(cm.exception.code, 2)


class TestMain(_CliTestCase):
    def test_prints_json_list(self):
        code, out = self.run_main([self.write("service.yml", SERVICE)])
        self.assertEqual(code, 0)
        self.assertEqual(
            json.loads(out),
            ["https://example.com/webhook1", "https://webhook.site/123456"],
        )

    def test_no_webhooks_prints_empty_list(self):
        code, out = self.run_main([self.write("service.yml", "service: x\n")])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), [])

    def test_malformed_document_succeeds(self):
        path = self.write("service.yml", "service: x\n  nested: y\n")
        code, out = self.run_main([path])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), [])

    def test_missing_file_fails(self):
        code, out = self.run_main([str(self.tmpdir / "missing.yml")])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_writes_github_output(self):
        output_file = self.tmpdir / "github_output"
        output_file.write_text("previous=1\n", encoding="utf-8")
        path = self.write("service.yml", SERVICE)
        with patch.dict(os.environ, {"GITHUB_OUTPUT": str(output_file)}):
            code, _ = self.run_main([path, "--output-name", "urls"])
        self.assertEqual(code, 0)
        self.assertEqual(
            output_file.read_text(encoding="utf-8"),
            'previous=1\nurls=["https://example.com/webhook1", '
            '"https://webhook.site/123456"]\n',
        )

    def test_log_file(self):
        log_file = self.tmpdir / "logs" / "run.log"
        path = self.write("service.yml", SERVICE)
        code, _ = self.run_main([path, "--log-file", str(log_file)])
        self.assertEqual(code, 0)
        for handler in log.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        self.assertIn("Found 2 webhook(s)", content)
        self.assertIn("https://webhook.site/123456", content)

    def test_skipped_entries_reported_in_log_file(self):
        log_file = self.tmpdir / "run.log"
        path = self.write("service.yml", SERVICE)
        self.run_main([path, "--log-file", str(log_file)])
        for handler in log.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        self.assertIn("not an absolute URL: 'not-a-valid-url'", content)

    def test_deeply_nested_document_succeeds(self):
        path = self.write("service.yml", "x-update-webhooks: " + "[" * 5000 + "]" * 5000)
        code, out = self.run_main([path])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), [])

    def test_stdout_is_only_json_in_ci(self):
        path = self.write("service.yml", SERVICE)
        with patch.dict(os.environ, {"GITHUB_ACTIONS": "true"}):
            with contextlib.redirect_stderr(io.StringIO()):
                code, out = self.run_main([path])
        self.assertEqual(code, 0)
        self.assertEqual(
            json.loads(out),
            ["https://example.com/webhook1", "https://webhook.site/123456"],
        )


class TestWriteGithubOutput(_CliTestCase):
    def test_noop_outside_actions(self):
        self.assertFalse(write_github_output("webhooks", "[]"))

    def test_appends_line(self):
        output_file = self.tmpdir / "out"
        with patch.dict(os.environ, {"GITHUB_OUTPUT": str(output_file)}):
            self.assertTrue(write_github_output("webhooks", "[]"))
            self.assertTrue(write_github_output("count", "0"))
        self.assertEqual(output_file.read_text(encoding="utf-8"), "webhooks=[]\ncount=0\n")


if __name__ == "__main__":
    unittest.main()
