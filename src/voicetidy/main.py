"""
voicetidy command-line entry point.

Transcribes an audio file, cleans up the transcript and prints only the
final text on stdout so it can be piped into other tools. Every progress
and error message goes to stderr.
"""

import argparse
import logging
import os
import sys

from voicetidy import dependencies
from voicetidy.config import load_config
from voicetidy.domain import CleanupMode
from voicetidy.exceptions import VoicetidyError
from voicetidy.logging import setup_logging

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Raises on malformed arguments instead of exiting with status 2."""

    def error(self, message):
        raise argparse.ArgumentError(None, message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="voicetidy",
        description="Transcribe an audio file and clean up the transcript.",
    )
    parser.add_argument("audio_path", nargs="?", help="audio file to transcribe")
    parser.add_argument(
        "--alt-mode",
        "--gpt5",
        dest="alt_mode",
        action="store_true",
        help="use the general-assistant cleanup mode instead of filler removal",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="diagnostic log level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        help="diagnostic log format (default: LOG_FORMAT or text)",
    )
    return parser


def select_mode(alt_mode: bool) -> CleanupMode:
    return CleanupMode.GENERAL_ASSISTANT if alt_mode else CleanupMode.FILLER_REMOVAL


def main(argv: list[str] | None = None) -> int:
    """Runs the pipeline once and returns the process exit status."""
    parser = build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        parser.print_usage(sys.stderr)
        sys.stderr.write(f"{parser.prog}: error: {e}\n")
        return 1

    try:
        config = load_config()
    except VoicetidyError as e:
        setup_logging(args.log_level or "INFO", args.log_format or "text")
        logger.error("%s", e)
        return 1

    setup_logging(
        args.log_level or config.logging.level,
        args.log_format or config.logging.format,
    )

    for option in unknown:
        logger.warning("Ignoring unrecognized argument %s", option)

    if not args.audio_path:
        parser.print_usage(sys.stderr)
        return 1

    try:
        config.require_credentials()
        pipeline = dependencies.build_pipeline(config)
        outcome = pipeline.run(args.audio_path, select_mode(args.alt_mode))
    except VoicetidyError as e:
        logger.error("Failed to transcribe audio: %s", e)
        return 1
    except Exception:
        logger.exception("Failed to transcribe audio")
        return 1

    try:
        sys.stdout.write(outcome.text + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        # The interpreter flushes stdout again on exit.
        sys.stdout = open(os.devnull, "w")
        logger.error("Output stream closed before the transcript was written")
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
