"""CLI argument, opener selection and exit-status tests.

Verifies how ``quickfile.cli`` resolves endpoint, roots and opener before
handing off to an interactive session.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from quickfile import cli, config
from quickfile.errors import ConfigError, NetworkError
from quickfile.location import Location
from quickfile.opener import EditorOpener, PrintOpener
from quickfile.runtime import SessionResult


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "config.json"
        path_patcher = mock.patch("quickfile.config.CONFIG_PATH", self.config_path)
        path_patcher.start()
        self.addCleanup(path_patcher.stop)
        env_patcher = mock.patch.dict("os.environ", {config.ENDPOINT_ENV_VAR: "", "EDITOR": ""})
        env_patcher.start()
        self.addCleanup(env_patcher.stop)


class CliParserTests(CliTestCase):
    def test_parser_collects_roots_and_options(self) -> None:
        args = cli.build_parser().parse_args(
            ["/workspace", "/other", "--endpoint", "http://host/files", "--timeout", "2.5", "--open", "print"]
        )

        self.assertEqual(args.roots, ["/workspace", "/other"])
        self.assertEqual(args.endpoint, "http://host/files")
        self.assertEqual(args.timeout, 2.5)
        self.assertEqual(args.opener, "print")
        self.assertFalse(args.no_color)

    def test_parser_rejects_non_positive_timeout(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO), self.assertRaises(SystemExit):
            cli.build_parser().parse_args(["--timeout", "0"])

    def test_resolve_opener_follows_name_then_editor_env(self) -> None:
        roots = [Location("/workspace")]

        self.assertIsInstance(cli.resolve_opener("print", roots, None), PrintOpener)
        self.assertIsInstance(cli.resolve_opener(None, roots, None), PrintOpener)

        with mock.patch.dict("os.environ", {"EDITOR": "vi"}):
            opener = cli.resolve_opener(None, roots, "/mirror")

        self.assertIsInstance(opener, EditorOpener)
        self.assertEqual(opener.remote_root, Location("/workspace"))
        self.assertEqual(opener.local_root, Path("/mirror"))


class CliRunTests(CliTestCase):
    def _args(self, *argv: str):
        return cli.build_parser().parse_args(list(argv))

    def test_missing_endpoint_is_a_config_error(self) -> None:
        with self.assertRaises(ConfigError):
            cli.run(self._args("/workspace"))

    def test_save_config_persists_before_terminal_check(self) -> None:
        args = self._args("/workspace", "--endpoint", "http://host/files", "--theme", "ocean", "--save-config")

        with mock.patch("quickfile.cli.sys.stdin") as stdin, self.assertRaises(ConfigError):
            stdin.isatty.return_value = False
            cli.run(args)

        self.assertEqual(config.load_endpoint(), "http://host/files")
        self.assertEqual(config.load_workspace_roots(), ["/workspace"])
        self.assertEqual(config.load_theme_name(), "ocean")

    def _run_with_result(self, result: SessionResult, *argv: str):
        with mock.patch("quickfile.cli.sys.stdin") as stdin, mock.patch(
            "quickfile.cli.TerminalController"
        ), mock.patch("quickfile.cli.RemoteListingClient") as client_cls, mock.patch(
            "quickfile.cli.QuickFileSession"
        ) as session_cls:
            stdin.isatty.return_value = True
            session_cls.return_value.run.return_value = result
            try:
                return cli.run(self._args(*argv)), session_cls, client_cls
            finally:
                client_cls.return_value.close.assert_called_once_with()

    def test_successful_session_returns_zero_and_closes_client(self) -> None:
        status, session_cls, client_cls = self._run_with_result(
            SessionResult(opened=Location("/workspace/a.py"), error=None),
            "/workspace",
            "--endpoint",
            "http://host/files",
            "--query-param",
            "path",
        )

        self.assertEqual(status, 0)
        client_cls.assert_called_once_with(
            "http://host/files", timeout=config.load_timeout(), query_param="path"
        )
        roots = session_cls.call_args.args[2]
        self.assertEqual(roots, [Location("/workspace")])

    def test_session_error_is_raised(self) -> None:
        with self.assertRaises(NetworkError):
            self._run_with_result(
                SessionResult(opened=None, error=NetworkError("down")),
                "/workspace",
                "--endpoint",
                "http://host/files",
            )

    def test_open_failure_message_sets_status(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            status, _session, _client = self._run_with_result(
                SessionResult(opened=Location("/workspace/a.py"), error=None, open_message="Cannot edit"),
                "/workspace",
                "--endpoint",
                "http://host/files",
            )

        self.assertEqual(status, 1)
        self.assertIn("Cannot edit", stderr.getvalue())


class CliMainTests(CliTestCase):
    def test_main_reports_errors_with_exit_status_one(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit) as raised:
                cli.main(["/workspace"])

        self.assertEqual(raised.exception.code, 1)
        self.assertIn("quickfile: no listing endpoint", stderr.getvalue())

    def test_main_exits_with_run_status(self) -> None:
        with mock.patch("quickfile.cli.run", return_value=0), self.assertRaises(SystemExit) as raised:
            cli.main(["/workspace"])

        self.assertEqual(raised.exception.code, 0)

    def test_main_maps_keyboard_interrupt(self) -> None:
        with mock.patch("quickfile.cli.run", side_effect=KeyboardInterrupt), self.assertRaises(
            SystemExit
        ) as raised:
            cli.main([])

        self.assertEqual(raised.exception.code, 130)


if __name__ == "__main__":
    unittest.main()
