import sys
import os
import logging
import argparse
import traceback
from typing import Optional

from common.constants import APP_NAME, APP_DESCRIPTION, APP_LOG_FILENAME
from utils.version import get_version


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=f"{APP_NAME} - {APP_DESCRIPTION}")
    parser.add_argument("--version", action="store_true", help="Show version information and exit")
    parser.add_argument("--cities", type=str, metavar="PATH", help="City snapshot JSON to display")
    parser.add_argument("--icons", type=str, metavar="DIR", help="Directory holding the icon resources")
    parser.add_argument("--config", type=str, metavar="PATH", help="Use this config.ini instead of the default")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the log level from config.ini",
    )
    return parser.parse_args(argv)


def _setup_logging_early(config) -> tuple[str, logging.Logger]:
    """Setup async logging and return (log_file_path, logger)."""
    from common.utils.async_logging import setup_async_logging
    from utils.files import get_localappdata_dir

    log_file_path = os.path.join(get_localappdata_dir(), APP_LOG_FILENAME)
    setup_async_logging(log_level=config.log_level, log_file_path=log_file_path)

    logger = logging.getLogger(__name__)
    logger.info(f"{APP_NAME} {get_version()} started with log level: {config.log_level_str}")
    config.log_config_location()
    return log_file_path, logger


def _apply_overrides(config, args: argparse.Namespace) -> None:
    if args.cities:
        config.cities_file = args.cities
    if args.icons:
        config.icon_directory = args.icons
    if args.log_level:
        config.set_log_level(args.log_level)


def main(argv=None) -> int:
    """Main entry point for the City Overview application"""
    log_file_path: Optional[str] = None
    args = parse_arguments(argv)

    if args.version:
        print(f"{APP_NAME} {get_version()}")
        return 0

    try:
        from common.config import Config
        from model.game_info import CitySnapshotError, GameInfo

        config = Config(custom_config_path=args.config)
        _apply_overrides(config, args)
        log_file_path, logger = _setup_logging_early(config)

        from utils.exception_handler import install_global_exception_handler

        install_global_exception_handler(log_file_path)

        try:
            game_info = GameInfo.from_file(config.cities_file)
        except (OSError, CitySnapshotError) as e:
            logger.error(f"Could not load city snapshot: {e}")
            print(f"ERROR: Could not load city snapshot: {e}", file=sys.stderr)
            return 2

        from ui.main_window import create_and_run_gui

        return create_and_run_gui(config, game_info)

    except Exception as e:
        # Critical startup failure - log what we can
        error_details = traceback.format_exc()
        logging.getLogger(__name__).critical(f"Critical startup error: {e}\n{error_details}")
        print(f"A critical error occurred during application startup:\n\n{e}", file=sys.stderr)
        if log_file_path:
            print(f"Details have been logged to: {log_file_path}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
