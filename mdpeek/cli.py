"""Command-line front door for mdpeek.

Parses options, resolves configuration, sets up file logging, and runs the
interactive browser in the current working directory. Directory listing
failures end the process with a one-line error; ``:q`` exits silently.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME, LOG_LEVELS, AppConfig, load_config, resolve_config
from .runtime import run_app
from .ui_theme import available_theme_names

LOG_FILENAME = "mdpeek.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Browse the current directory and preview files; Markdown is shown as highlighted HTML.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for document content.")
    parser.add_argument("--no-color", action="store_true", default=None, help="Disable color output.")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for the log file (default: WARNING).",
    )
    return parser


def configure_logging(level: str, log_dir: Path | None = None) -> Path | None:
    """Send log records to a file; the terminal belongs to the UI.

    Returns the log file path, or ``None`` when logging had to be disabled.
    """
    directory = Path(user_log_dir(APP_NAME, appauthor=False)) if log_dir is None else log_dir
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        # A NullHandler on the root keeps records off stderr.
        logging.getLogger().addHandler(logging.NullHandler())
        return None
    log_path = directory / LOG_FILENAME
    logging.basicConfig(filename=log_path, level=getattr(logging, level), format=LOG_FORMAT)
    return log_path


def stdin_is_terminal() -> bool:
    try:
        return os.isatty(sys.stdin.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch mdpeek in the current directory."""
    args = build_parser().parse_args(argv)
    config: AppConfig = resolve_config(
        load_config(),
        os.environ,
        {
            "theme": args.theme,
            "syntax_style": args.style,
            "no_color": args.no_color,
            "log_level": args.log_level,
        },
    )
    configure_logging(config.log_level)

    if not stdin_is_terminal():
        raise SystemExit(f"{APP_NAME}: stdin is not a terminal")

    try:
        run_app(config)
    except OSError as exc:
        logger.exception("fatal error")
        raise SystemExit(f"{APP_NAME}: {exc}") from exc
    logger.info("quit")


if __name__ == "__main__":
    main()
