"""
Interactive convex hull shell.

Reads commands from standard input and writes results to standard output.
Logs go to standard error (and optionally to a file).

Usage:
    python program.py
    python program.py --config shell.yaml --log-level DEBUG
    echo "add 0 0" | python program.py --no-prompt
"""

import argparse
import dataclasses
import logging
import sys

from config import ShellConfig, load_config
from shell import Shell


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> logging.Logger:
    """
    Setup logging for the shell.
    Console handler writes to stderr, stdout is reserved for command output.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )
    return logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convex hull of integer points (Graham scan), interactive shell",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Type 'help' inside the shell to list the commands.",
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='YAML file with shell settings',
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (DEBUG, INFO, WARNING, ERROR)',
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write logs to this file',
    )
    parser.add_argument(
        '--no-prompt',
        action='store_true',
        help='Do not print the prompt before each line',
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ShellConfig:
    config = load_config(args.config) if args.config else ShellConfig()

    overrides = {}
    if args.log_level is not None:
        overrides['log_level'] = args.log_level
    if args.log_file is not None:
        overrides['log_file'] = args.log_file
    if args.no_prompt:
        overrides['show_prompt'] = False
    return dataclasses.replace(config, **overrides)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error! {e}", file=sys.stderr)
        return 1

    logger = setup_logging(config.level, config.log_file)
    logger.info("Starting shell")

    shell = Shell(config, out=sys.stdout)
    shell.run(sys.stdin)

    logger.info("Shell finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
