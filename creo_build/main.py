#!/usr/bin/env python3
"""
Main entry point for the Creo CSS build tool
"""

import argparse
import signal
import sys
from pathlib import Path
from typing import Callable, Dict, Optional

from .builders import BuildOrchestrator, SassCompiler
from .config import ConfigLoader
from .exceptions import CreoBuildError
from .report import boxed
from .types import BuildConfig
from .utils import Logger

COMMANDS = ["all", "expanded", "compressed", "lean", "clean", "watch", "help"]


class BuildSystem:
    """Ties the configuration, sass wrapper and orchestrator together"""

    def __init__(self, config: BuildConfig, logger: Logger, dry_run: bool = False):
        """
        Initialize the build system

        Args:
            config: Build configuration
            logger: Logger instance
            dry_run: Log sass commands instead of running them
        """
        self.config = config
        self.logger = logger
        self.compiler = SassCompiler(config, logger, dry_run=dry_run)
        self.orchestrator = BuildOrchestrator(config, logger, compiler=self.compiler)

    def show_banner(self):
        self.logger.raw("")
        for line in boxed(f"{self.config.framework_name} Framework Builder"):
            self.logger.raw(line)
        self.logger.raw(f"  v{self.config.version}")
        self.logger.raw("")

    def check_dependencies(self):
        """Make sure sass is available, installing it once if needed"""
        self.compiler.ensure_available()

    def run(self, command: str):
        """
        Execute a build command

        Args:
            command: One of the build commands (not help)
        """
        handlers: Dict[str, Callable[[], None]] = {
            "all": self.orchestrator.build_all,
            "expanded": self.orchestrator.build_expanded,
            "compressed": self.orchestrator.build_compressed,
            "lean": self.orchestrator.build_lean,
            "clean": self.orchestrator.clean,
            "watch": self.orchestrator.watch,
        }
        if command not in handlers:
            raise ValueError(f"Unknown command: {command}")

        self.check_dependencies()
        handlers[command]()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="creo-build",
        description="Creo CSS Framework Build Script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  all         Build all variants (default)
  expanded    Build expanded CSS only
  compressed  Build compressed CSS only
  lean        Build lean variants only
  clean       Clean dist directory
  watch       Watch for changes and rebuild
  help        Show this help message
        """
    )

    parser.add_argument(
        "command",
        nargs="?",
        default="all",
        help="Command to execute (default: all)"
    )

    parser.add_argument(
        "--root",
        type=Path,
        help="Project root directory (default: current directory)"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Build config file (default: <root>/creo.build.yaml if present)"
    )

    parser.add_argument(
        "--no-source-map",
        action="store_true",
        help="Do not emit source maps"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print sass commands without running them"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--log-file",
        help="Also write log output to this file"
    )

    return parser


def _handle_sigterm(logger: Logger):
    def handler(signum, frame):
        logger.info("Build terminated")
        sys.exit(0)
    return handler


def main(argv: Optional[list] = None):
    """Command-line interface"""
    parser = create_parser()
    args = parser.parse_args(argv)
    command = args.command or "all"

    logger = Logger(verbose=args.verbose, log_file=args.log_file)

    if command == "help":
        parser.print_help()
        sys.exit(0)

    if command not in COMMANDS:
        logger.error(f"Unknown command: {command}")
        logger.info(f"Use '{parser.prog} help' for available commands")
        sys.exit(1)

    signal.signal(signal.SIGTERM, _handle_sigterm(logger))

    try:
        config = ConfigLoader(args.root, args.config).load(
            source_map=False if args.no_source_map else None
        )
        bs = BuildSystem(config, logger, dry_run=args.dry_run)
        bs.show_banner()
        bs.run(command)
    except KeyboardInterrupt:
        logger.raw("")
        logger.info("Build interrupted by user")
        sys.exit(0)
    except CreoBuildError as e:
        logger.error(f"Build failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Build failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
