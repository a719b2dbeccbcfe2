"""Core constants used across converter modules.

This module centralizes vocabulary literals and I/O defaults.
Keeping values here avoids magic literals in mapping logic.
"""

from __future__ import annotations

AFFILIATION_SCHEME = "affiliation"
ENGLISH_LANGUAGE_CODE = "en"
IDENTIFIER_SEPARATOR = "/"
UTF8_BOM = b"\xef\xbb\xbf"
DESTINATION_ENCODING = "utf-8"
DEFAULT_SOURCE_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
