"""
Console file manager entry point: restores the last session, then reads and
executes commands until 'exit'.
"""

import argparse
import logging
import os
import sys

from src.config.settings import PATH_STYLES, Settings
from src.container import DependencyContainer, container
from src.exceptions import BaseAppError

# Get logger for this module
logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Send log records to the log file so they do not disturb the console windows."""
    log_dir = os.path.dirname(settings.log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    logging.basicConfig(
        filename=settings.log_file,
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def apply_overrides(settings: Settings, args: argparse.Namespace) -> None:
    if args.state_file:
        settings.state_file = os.path.expanduser(args.state_file)
    if args.page_size is not None and args.page_size > 0:
        settings.files_per_page = args.page_size
    if args.path_style:
        settings.path_style = args.path_style


def run(app: DependencyContainer) -> int:
    """
    Run the interactive loop until the user exits.

    The session is saved on every way out, including Ctrl-C and closed input.
    """
    lifecycle = app.get_session_lifecycle()
    interpreter = app.get_command_interpreter()
    listing = app.get_list_directory_use_case()
    renderer = app.get_renderer()

    session = lifecycle.restore()
    try:
        while not session.exit_requested:
            page = listing.execute(session)
            renderer.render(page, session.notification)
            try:
                line = renderer.read_command()
            except EOFError:
                break
            interpreter.execute(session, line)
    except KeyboardInterrupt:
        logger.info("Interrupted by the user")
    finally:
        lifecycle.save(session)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cfm",
        description="Browse, copy, delete and inspect files from the console.",
    )
    parser.add_argument("--state-file", default=None, help="File keeping the last session")
    parser.add_argument("--page-size", type=int, default=None, help="Entries per page")
    parser.add_argument(
        "--path-style",
        choices=list(PATH_STYLES),
        default=None,
        help="How typed paths are interpreted (default: from FM_PATH_STYLE)",
    )
    args = parser.parse_args(argv)

    apply_overrides(container.settings, args)
    configure_logging(container.settings)

    try:
        return run(container)
    except BaseAppError as e:
        logger.error(f"Application error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
