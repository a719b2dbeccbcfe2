"""Vocabulary converter CLI entry points.

This module parses the vocabulary kind and file paths from argv.
It maps converter outcomes onto process exit codes and messages.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from typing import NoReturn, Sequence

from core.config import VocabConfig, parse_log_level
from core.errors import UnknownVocabularyError, UnsupportedVocabularyError, VocabError
from core.logging_config import configure_logging, get_logger
from core.vocabulary import SUPPORTED_VOCABULARY_KINDS, convert_vocabulary, parse_vocabulary_kind

_LOGGER = get_logger(__name__)
_KINDS_HINT = f"VOCAB_TYPE must be one of: {', '.join(SUPPORTED_VOCABULARY_KINDS)}"


class _ConverterArgumentParser(argparse.ArgumentParser):
    """Argument parser that lists the vocabulary kinds on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(2, f"{self.prog}: error: {message}\n{_KINDS_HINT}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = _ConverterArgumentParser(
        prog="vocab-converter",
        description="Convert controlled vocabulary JSON dumps into YAML",
        epilog=_KINDS_HINT,
    )
    parser.add_argument("--log-level", help="Override VOCAB_LOG_LEVEL for this command")
    parser.add_argument("vocab_type", metavar="VOCAB_TYPE", help="Vocabulary kind to convert")
    parser.add_argument("input_json", metavar="INPUT_JSON", help="Source JSON file")
    parser.add_argument("output_yaml", metavar="OUTPUT_YAML", help="Destination YAML file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.log_level)
    except VocabError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    configure_logging(config.log_level)
    return _run_convert_command(config, args)


def _build_config(log_level: str | None) -> VocabConfig:
    """Build runtime config with optional log-level override.

    Args:
        log_level: Optional level name from the command line.

    Returns:
        Validated runtime config.
    """
    config = VocabConfig.from_env()
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config


def _run_convert_command(config: VocabConfig, args: argparse.Namespace) -> int:
    """Dispatch conversion for the requested vocabulary kind.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        kind = parse_vocabulary_kind(args.vocab_type)
        summary = convert_vocabulary(kind, args.input_json, args.output_yaml, config)
    except UnknownVocabularyError as error:
        print(error, file=sys.stderr)
        print(_KINDS_HINT, file=sys.stderr)
        return 1
    except UnsupportedVocabularyError as error:
        _LOGGER.warning("vocabulary_unsupported", vocab_type=args.vocab_type.lower())
        print(error, file=sys.stderr)
        return 1
    except VocabError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    print(summary.destination_path)
    return 0
