"""Public SDK surface for the vocabulary converter.

This module provides a stable import path for library users.
It re-exports the conversion entry point, stage functions, and typed models.
"""

from __future__ import annotations

from core.config import VocabConfig
from core.errors import (
    ConversionError,
    DestinationWriteError,
    SourceReadError,
    SourceSchemaError,
    UnknownVocabularyError,
    UnsupportedVocabularyError,
    VocabError,
)
from core.types import ConversionSummary, Identifier, RawLabel, RawRecord, TargetRecord
from core.vocabulary import SUPPORTED_VOCABULARY_KINDS, convert_vocabulary
from ingest.pipeline import convert
from ingest.source_reader import read_source_records
from store.yaml_writer import write_target_records
from transforms.affiliation_mapping import map_affiliation_record, map_affiliation_records
from transforms.transliteration import sanitize

__all__ = [
    "ConversionError",
    "ConversionSummary",
    "DestinationWriteError",
    "Identifier",
    "RawLabel",
    "RawRecord",
    "SUPPORTED_VOCABULARY_KINDS",
    "SourceReadError",
    "SourceSchemaError",
    "TargetRecord",
    "UnknownVocabularyError",
    "UnsupportedVocabularyError",
    "VocabConfig",
    "VocabError",
    "convert",
    "convert_vocabulary",
    "map_affiliation_record",
    "map_affiliation_records",
    "read_source_records",
    "sanitize",
    "write_target_records",
]
