"""Converter exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class VocabError(Exception):
    """Base exception for all converter failures."""


class VocabConfigError(VocabError):
    """Raised for invalid runtime configuration."""


class ConversionError(VocabError):
    """Base exception for failures of a single conversion call."""


class SourceReadError(ConversionError):
    """Raised when the source file is missing, unreadable, or not valid JSON."""


class SourceSchemaError(ConversionError):
    """Raised when source JSON does not match the expected record shape."""


class DestinationWriteError(ConversionError):
    """Raised when the destination file cannot be created or written."""


class UnsupportedVocabularyError(VocabError):
    """Raised for declared vocabulary kinds without a converter."""


class UnknownVocabularyError(VocabError):
    """Raised for vocabulary kinds outside the supported set."""
