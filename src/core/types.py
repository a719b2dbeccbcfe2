"""Shared typed models.

This module defines immutable data models used by the loader, mapper,
writer, and SDK layers to keep stage interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping


@dataclass(frozen=True)
class RawLabel:
    """One language-tagged label from a source record.

    Attributes:
        language_code: ISO 639 language code, empty when missing.
        label_text: Label text in that language, empty when missing.
    """

    language_code: str
    label_text: str


@dataclass(frozen=True)
class RawRecord:
    """Source affiliation record after null-coalescing.

    Attributes:
        record_id: Source identifier, usually a registry URL.
        name: Primary organization name.
        labels: Ordered language-tagged labels.
        acronyms: Ordered acronyms, possibly containing empty strings.
    """

    record_id: str
    name: str
    labels: tuple[RawLabel, ...] = ()
    acronyms: tuple[str, ...] = ()


@dataclass(frozen=True)
class Identifier:
    """Scheme-tagged identifier value.

    Attributes:
        identifier: Identifier value.
        scheme: Vocabulary scheme the identifier belongs to.
    """

    identifier: str
    scheme: str


@dataclass(frozen=True)
class TargetRecord:
    """Flattened multilingual record written to YAML.

    Attributes:
        record_id: Final path segment of the sanitized source identifier.
        name: Sanitized primary name.
        title: Language code to sanitized label, always keyed by ``en``.
        identifiers: Scheme-tagged identifiers for the record.
        acronym: First non-empty acronym, sanitized, when one exists.
    """

    record_id: str
    name: str
    title: Mapping[str, str] = field(default_factory=dict)
    identifiers: tuple[Identifier, ...] = ()
    acronym: str | None = None


@dataclass(frozen=True)
class ConversionSummary:
    """Outcome of one successful conversion call.

    Attributes:
        source_path: Resolved source JSON path.
        destination_path: Resolved destination YAML path.
        input_count: Number of records loaded from source.
        output_count: Number of records written to destination.
    """

    source_path: Path
    destination_path: Path
    input_count: int
    output_count: int
