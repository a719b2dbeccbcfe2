"""Runtime configuration model for the converter.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os

from core.constants import DEFAULT_LOG_LEVEL, DEFAULT_SOURCE_ENCODING, SUPPORTED_LOG_LEVELS
from core.errors import VocabConfigError


@dataclass(frozen=True)
class VocabConfig:
    """Validated runtime configuration.

    Attributes:
        source_encoding: Text encoding used to decode source JSON files.
        log_level: Minimum structured log level.
    """

    source_encoding: str = DEFAULT_SOURCE_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "VocabConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            VocabConfigError: If environment values are invalid.
        """
        encoding_value = os.getenv("VOCAB_SOURCE_ENCODING", DEFAULT_SOURCE_ENCODING)
        log_level_value = os.getenv("VOCAB_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            source_encoding=parse_source_encoding(encoding_value),
            log_level=parse_log_level(log_level_value),
        )


def parse_source_encoding(raw_value: str) -> str:
    """Validate a source encoding name.

    Args:
        raw_value: Raw encoding name from environment.

    Returns:
        Canonical codec name.

    Raises:
        VocabConfigError: If the codec is unknown.
    """
    try:
        return codecs.lookup(raw_value.strip()).name
    except LookupError as error:
        raise VocabConfigError(
            "Invalid VOCAB_SOURCE_ENCODING value: "
            f"unknown codec '{raw_value}'. "
            "Set VOCAB_SOURCE_ENCODING to a codec name such as 'utf-8'."
        ) from error


def parse_log_level(raw_value: str) -> str:
    """Validate a log level name.

    Args:
        raw_value: Raw level name from environment or CLI.

    Returns:
        Upper-cased level name.

    Raises:
        VocabConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise VocabConfigError(
            f"Invalid log level '{raw_value}': expected one of {SUPPORTED_LOG_LEVELS}. "
            "Set VOCAB_LOG_LEVEL or --log-level to a supported value."
        )
    return level
