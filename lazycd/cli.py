"""Command-line front door for lazycd.

Parses CLI options, resolves the starting directory, runs the interactive
browser, and prints the chosen directory for the calling shell, e.g.::

    lcd() { cd "$(lazycd "$@")"; }
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .browser import Browser, STAY_PATH
from .config import load_show_hidden, load_theme_name, save_show_hidden, save_theme_name
from .directory_view import DirectoryView
from .errors import LazyCdError
from .log import configure_logging
from .runtime import run_main_loop
from .terminal import TerminalController
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)


def build_browser(path_arg: str | None, show_hidden: bool) -> Browser:
    """Open the starting directory and wrap it in a ``Browser``.

    A ``path_arg`` that cannot be entered becomes the initial error message
    and browsing starts in the process working directory instead. Failing to
    read the working directory itself is fatal.
    """
    try:
        cwd = Path.cwd()
    except OSError as exc:
        raise SystemExit(f"lazycd: cannot determine current directory ({exc})") from exc

    message: str | None = None
    if path_arg:
        try:
            view = DirectoryView.open(cwd / Path(path_arg).expanduser(), show_hidden=show_hidden)
        except LazyCdError as exc:
            logger.warning("startup path %s rejected: %s", path_arg, exc)
            message = f"Unable to change directory to `{path_arg}`. (Error: {exc.reason})"
        else:
            return Browser(view)

    try:
        view = DirectoryView.open(cwd, show_hidden=show_hidden)
    except LazyCdError as exc:
        raise SystemExit(f"lazycd: {exc}") from exc
    return Browser(view, initial_message=message)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazycd",
        description="Browse directories in the terminal and print the chosen one.",
    )
    parser.add_argument(
        "path",
        nargs="*",
        help="Directory to start in. Defaults to the current directory.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}). Remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    hidden = parser.add_mutually_exclusive_group()
    hidden.add_argument(
        "--show-hidden",
        dest="show_hidden",
        action="store_true",
        default=None,
        help="List dot-files (default). Remembered for later runs.",
    )
    hidden.add_argument(
        "--hide-hidden",
        dest="show_hidden",
        action="store_false",
        help="Do not list dot-files. Remembered for later runs.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug log to FILE.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the browser, and print the exit path to stdout."""
    args = _build_parser().parse_args(argv)
    if len(args.path) > 1:
        raise SystemExit("too many arguments")

    configure_logging(args.log_file)

    if args.theme is not None:
        theme_name = normalize_theme_name(args.theme)
        save_theme_name(theme_name)
    else:
        theme_name = load_theme_name()
    if args.show_hidden is not None:
        show_hidden = args.show_hidden
        save_show_hidden(show_hidden)
    else:
        show_hidden = load_show_hidden()

    browser = build_browser(args.path[0] if args.path else None, show_hidden)

    if not sys.stdin.isatty():
        raise SystemExit("lazycd: stdin is not a terminal")
    terminal = TerminalController(sys.stdin.fileno(), sys.stderr.fileno())
    theme = resolve_theme(theme_name, no_color=args.no_color or bool(os.environ.get("NO_COLOR")))
    exit_path = run_main_loop(browser, terminal, sys.stdin.fileno(), theme)
    logger.debug("exiting with %s", exit_path)

    sys.stdout.write(exit_path if exit_path is not None else STAY_PATH)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
