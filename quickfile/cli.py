"""Command-line front door for quickfile.

Resolves the listing endpoint, workspace roots and opener from arguments and
config, then runs one interactive picker session in the terminal.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config
from .errors import ConfigError, QuickFileError
from .location import Location
from .opener import EditorOpener, PrintOpener
from .remote import ListingScheduler, RemoteListingClient
from .runtime import QuickFileSession
from .terminal import TerminalController, available_theme_names, resolve_theme
from .workspace_roots import discover_workspace_roots

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_float(value: str) -> float:
    """argparse type for positive float values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quickfile",
        description="Fuzzy-pick a file from a remote directory tree, one listing at a time.",
    )
    parser.add_argument(
        "roots",
        nargs="*",
        metavar="ROOT",
        help="Workspace root location(s). The first one is opened. Defaults to configured roots.",
    )
    parser.add_argument("--endpoint", help=f"Listing endpoint URL (or ${config.ENDPOINT_ENV_VAR}).")
    parser.add_argument("--timeout", type=_positive_float, default=None, help="Request timeout in seconds.")
    parser.add_argument(
        "--query-param",
        default=None,
        help="Send the location as ?NAME=PATH instead of as the bare query string.",
    )
    parser.add_argument(
        "--open",
        dest="opener",
        choices=config.OPENER_NAMES,
        default=None,
        help="How to open the chosen file (default: editor when $EDITOR is set, else print).",
    )
    parser.add_argument("--local-root", default=None, help="Local directory mirroring the first root.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    parser.add_argument("--save-config", action="store_true", help="Persist endpoint, roots and theme.")
    parser.add_argument("--log-file", default=None, help="Write logs to this file.")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level (needs --log-file).")
    return parser


def configure_logging(log_file: str | None, verbose: bool) -> None:
    """Attach a file handler when requested; the TUI owns the terminal otherwise."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def resolve_opener(name: str | None, roots: list[Location], local_root: str | None):
    choice = name or config.load_opener()
    if choice is None:
        choice = "editor" if os.environ.get("EDITOR", "").strip() else "print"
    if choice == "print":
        return PrintOpener()
    mirror = local_root or config.load_local_root()
    return EditorOpener(
        remote_root=roots[0] if roots else None,
        local_root=Path(mirror).expanduser() if mirror else None,
    )


def run(args: argparse.Namespace) -> int:
    endpoint = args.endpoint or config.load_endpoint()
    if not endpoint:
        raise ConfigError(f"no listing endpoint: pass --endpoint or set ${config.ENDPOINT_ENV_VAR}")
    roots = discover_workspace_roots(args.roots, config.load_workspace_roots())
    theme_name = args.theme or config.load_theme_name()

    if args.save_config:
        config.save_endpoint(endpoint)
        if args.roots:
            config.save_workspace_roots([str(root) for root in roots])
        if args.theme:
            config.save_theme_name(args.theme)

    if not sys.stdin.isatty():
        raise ConfigError("quickfile needs an interactive terminal on stdin")
    client = RemoteListingClient(
        endpoint,
        timeout=args.timeout if args.timeout is not None else config.load_timeout(),
        query_param=args.query_param if args.query_param is not None else config.load_query_param(),
    )
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    session = QuickFileSession(
        ListingScheduler(client.list),
        resolve_opener(args.opener, roots, args.local_root),
        roots,
        terminal,
        stdin_fd=sys.stdin.fileno(),
        theme=resolve_theme(theme_name, no_color=args.no_color),
    )
    try:
        result = session.run()
    finally:
        client.close()

    if result.error is not None:
        raise result.error
    if result.open_message:
        print(f"quickfile: {result.open_message}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run a session and exit with its status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)
    try:
        status = run(args)
    except QuickFileError as exc:
        logger.error("%s", exc)
        print(f"quickfile: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        raise SystemExit(130)
    raise SystemExit(status)


if __name__ == "__main__":
    main()
