"""Command-line front door for lazytodo.

Parses CLI options, configures diagnostics, and runs the interactive list.
Terminal I/O failures surface here after the terminal has been restored.
"""

from __future__ import annotations

import argparse
import logging
import termios
from pathlib import Path

from .runtime import NotATerminalError, run_app
from .runtime.config import save_theme_name
from .runtime.log import setup_logging
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazytodo",
        description="Keep a to-do list in an interactive terminal view.",
    )
    parser.add_argument("items", nargs="*", help="Items to start the list with.")
    parser.add_argument(
        "--theme",
        default=None,
        choices=available_theme_names(),
        help="UI theme; remembered for later sessions.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Write diagnostics to the log file at this level.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Override the log file location.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run one session.

    Exits with status 1 and a one-line message when the terminal cannot be
    used or input/output fails mid-session.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if args.theme is not None:
        save_theme_name(args.theme)

    try:
        run_app(args.items, theme_name=args.theme, no_color=args.no_color)
    except NotATerminalError as exc:
        raise SystemExit(f"lazytodo: {exc}") from exc
    except KeyboardInterrupt:
        logger.info("interrupted")
    except (OSError, EOFError, termios.error) as exc:
        logger.exception("session aborted")
        raise SystemExit(f"lazytodo: {exc}") from exc


if __name__ == "__main__":
    main()
