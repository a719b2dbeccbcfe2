"""Affiliation record mapping transform.

This module maps raw registry records onto flattened multilingual
target records: identifier extraction, title aggregation, and
acronym selection. It is pure and never fails on a parsed record.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import AFFILIATION_SCHEME, ENGLISH_LANGUAGE_CODE, IDENTIFIER_SEPARATOR
from core.types import Identifier, RawLabel, RawRecord, TargetRecord
from transforms.transliteration import sanitize


def map_affiliation_record(record: RawRecord) -> TargetRecord:
    """Map one raw affiliation record onto its target shape.

    Args:
        record: Null-coalesced source record.

    Returns:
        Target record with sanitized fields.
    """
    id_segment = extract_id_segment(record.record_id)
    name = sanitize(record.name)
    return TargetRecord(
        record_id=id_segment,
        name=name,
        title=build_title(name, record.labels),
        identifiers=(Identifier(identifier=id_segment, scheme=AFFILIATION_SCHEME),),
        acronym=select_acronym(record.acronyms),
    )


def map_affiliation_records(records: Iterable[RawRecord]) -> list[TargetRecord]:
    """Map raw records in order, one target per source record."""
    return [map_affiliation_record(record) for record in records]


def extract_id_segment(raw_id: str) -> str:
    """Return the last ``/`` segment of the sanitized identifier.

    Args:
        raw_id: Source identifier, e.g. ``https://ror.org/00aaa1234``.

    Returns:
        Final path segment, possibly empty.
    """
    return sanitize(raw_id).split(IDENTIFIER_SEPARATOR)[-1]


def build_title(sanitized_name: str, labels: Iterable[RawLabel]) -> dict[str, str]:
    """Build the language-code to label map.

    Labels are skipped unless both the sanitized code and the sanitized
    text are non-empty. Later labels overwrite earlier ones with the same code.

    Args:
        sanitized_name: Already sanitized primary name, stored under ``en``.
        labels: Source labels in order.

    Returns:
        Insertion-ordered title map.
    """
    title = {ENGLISH_LANGUAGE_CODE: sanitized_name}
    for label in labels:
        language_code = sanitize(label.language_code)
        label_text = sanitize(label.label_text)
        if language_code and label_text:
            title[language_code] = label_text
    return title


def select_acronym(acronyms: Iterable[str]) -> str | None:
    """Return the sanitized first acronym that is non-empty before sanitizing."""
    # Emptiness is checked on the raw value, unlike labels.
    for acronym in acronyms:
        if acronym:
            return sanitize(acronym)
    return None
