"""Controlled vocabulary kinds and converter dispatch.

This module declares the closed set of vocabulary kinds the CLI accepts.
Only affiliations carry a converter; the others are explicitly unsupported.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, cast

from core.config import VocabConfig
from core.errors import UnknownVocabularyError, UnsupportedVocabularyError
from core.types import ConversionSummary
from ingest.pipeline import convert

VocabularyKind = Literal["affiliations", "names", "funding", "awards", "subjects"]
SUPPORTED_VOCABULARY_KINDS: tuple[VocabularyKind, ...] = (
    "affiliations",
    "names",
    "funding",
    "awards",
    "subjects",
)
IMPLEMENTED_VOCABULARY_KINDS: tuple[VocabularyKind, ...] = ("affiliations",)


def parse_vocabulary_kind(raw_kind: str) -> VocabularyKind:
    """Normalize and validate a vocabulary kind name.

    Args:
        raw_kind: Kind name as typed by the user, any case.

    Returns:
        Lower-cased vocabulary kind.

    Raises:
        UnknownVocabularyError: If the kind is not in the supported set.
    """
    kind = raw_kind.lower()
    if kind not in SUPPORTED_VOCABULARY_KINDS:
        raise UnknownVocabularyError(f"Unknown vocabulary type: {kind}")
    return cast(VocabularyKind, kind)


def is_implemented(kind: VocabularyKind) -> bool:
    """Return whether a vocabulary kind has a converter."""
    return kind in IMPLEMENTED_VOCABULARY_KINDS


def convert_vocabulary(
    kind: VocabularyKind,
    source_path: str | Path,
    destination_path: str | Path,
    config: VocabConfig | None = None,
) -> ConversionSummary:
    """Convert a source JSON file for the given vocabulary kind.

    Args:
        kind: Validated vocabulary kind.
        source_path: Source JSON path.
        destination_path: Destination YAML path.
        config: Optional runtime configuration.

    Returns:
        Summary of the finished conversion.

    Raises:
        UnsupportedVocabularyError: If the kind has no converter yet.
        ConversionError: If the conversion itself fails.
    """
    if not is_implemented(kind):
        raise UnsupportedVocabularyError(
            f"{kind.capitalize()} vocabulary conversion not yet implemented."
        )
    return convert(source_path, destination_path, config)
