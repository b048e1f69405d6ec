"""Main entry point for the termhud overlay."""
import argparse
import logging
import sys

from . import __version__
from .config.config_manager import ConfigManager
from .config.logging_config import LoggingConfig, setup_logging
from .core.data_manager import DataCollectionManager
from .errors import ConfigError, TerminalError
from .ui.display_manager import DisplayManager

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termhud",
        description="Clock, weather and system metrics overlay. Press 'q' to quit."
    )
    parser.add_argument("--config", default=None, help="YAML config file (default: built-in)")
    parser.add_argument("--log-file", default=None, help="write logs to this file")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager.load_config(args.config)
    except ConfigError as e:
        print(f"termhud: {e}", file=sys.stderr)
        return 2

    if args.log_file is not None or args.log_level is not None:
        config.logging = LoggingConfig(
            level=args.log_level or config.logging.level,
            file=args.log_file or config.logging.file,
        )
    try:
        setup_logging(config.logging.level, config.logging.file)
    except OSError as e:
        print(f"termhud: cannot open log file: {e}", file=sys.stderr)
        return 2

    data_manager = DataCollectionManager(config)
    display_manager = DisplayManager(config)

    data_manager.start_collection()
    try:
        display_manager.run_display(data_manager.get_shared_data())
    except KeyboardInterrupt:
        pass
    except (TerminalError, OSError) as e:
        # terminal is already restored by the session at this point
        logger.exception("Fatal terminal error")
        print(f"termhud: {e}", file=sys.stderr)
        return 1
    finally:
        data_manager.stop_collection()
    return 0


if __name__ == "__main__":
    sys.exit(main())
