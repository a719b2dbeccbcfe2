"""Unit tests for the affiliation mapping transform."""

from __future__ import annotations

import pytest

from core.types import Identifier, RawLabel, RawRecord
from transforms.affiliation_mapping import (
    build_title,
    extract_id_segment,
    map_affiliation_record,
    map_affiliation_records,
    select_acronym,
)


def test_map_affiliation_record_builds_multilingual_target() -> None:
    """Mapper should sanitize fields and collect labels under their codes."""
    record = RawRecord(
        record_id="https://ror.org/00aaa1234",
        name="Université de Test",
        labels=(RawLabel(language_code="fr", label_text="Université de Test"),),
        acronyms=("", "UT"),
    )

    target = map_affiliation_record(record)

    assert target.record_id == "00aaa1234"
    assert target.name == "Universite de Test"
    assert dict(target.title) == {"en": "Universite de Test", "fr": "Universite de Test"}
    assert target.identifiers == (Identifier(identifier="00aaa1234", scheme="affiliation"),)
    assert target.acronym == "UT"


def test_map_affiliation_record_handles_degenerate_record() -> None:
    """An all-empty record should still map to a valid target."""
    target = map_affiliation_record(RawRecord(record_id="", name=""))

    assert target.record_id == ""
    assert dict(target.title) == {"en": ""}
    assert target.identifiers == (Identifier(identifier="", scheme="affiliation"),)
    assert target.acronym is None


def test_map_affiliation_records_preserves_count_and_order() -> None:
    """Every source record should produce one target, in order."""
    records = [
        RawRecord(record_id="https://ror.org/b", name="Same"),
        RawRecord(record_id="https://ror.org/a", name="Same"),
    ]

    targets = map_affiliation_records(records)

    assert [target.record_id for target in targets] == ["b", "a"]


@pytest.mark.parametrize(
    ("raw_id", "expected"),
    [
        ("https://ror.org/00aaa1234", "00aaa1234"),
        ("00aaa1234", "00aaa1234"),
        ("", ""),
        ("https://ror.org/", ""),
        ("https://ror.org/special/chars!@#$%", "chars!@#$%"),
    ],
)
def test_extract_id_segment_takes_last_path_segment(raw_id: str, expected: str) -> None:
    """Identifier extraction should keep only the final segment."""
    assert extract_id_segment(raw_id) == expected


def test_build_title_drops_incomplete_labels() -> None:
    """Labels missing a code or a text should be skipped entirely."""
    labels = [
        RawLabel(language_code="", label_text="Some Label"),
        RawLabel(language_code="es", label_text=""),
        RawLabel(language_code="de", label_text="Test Universität"),
    ]

    title = build_title("Test University", labels)

    assert title == {"en": "Test University", "de": "Test Universitat"}


def test_build_title_keeps_last_label_for_repeated_code() -> None:
    """A later label with the same code should overwrite the earlier one."""
    labels = [
        RawLabel(language_code="fr", label_text="Premier"),
        RawLabel(language_code="fr", label_text="Second"),
        RawLabel(language_code="en", label_text="Override"),
    ]

    title = build_title("Name", labels)

    assert title == {"en": "Override", "fr": "Second"}


def test_build_title_checks_emptiness_after_sanitizing() -> None:
    """A label whose code or text transliterates to empty should be dropped."""
    labels = [
        RawLabel(language_code="fr", label_text="\U0001F600"),
        RawLabel(language_code="\U0001F600", label_text="Libelle"),
    ]

    title = build_title("Name", labels)

    assert title == {"en": "Name"}


def test_select_acronym_returns_first_non_empty_sanitized() -> None:
    """Acronym selection should skip empty entries and sanitize the match."""
    assert select_acronym(["", "ÉTS", "OTHER"]) == "ETS"


def test_select_acronym_returns_none_when_all_empty() -> None:
    """No acronym should be selected when every entry is empty."""
    assert select_acronym(["", ""]) is None
    assert select_acronym([]) is None


def test_select_acronym_checks_emptiness_before_sanitizing() -> None:
    """A raw non-empty acronym should win even if it transliterates to empty."""
    assert select_acronym(["\U0001F600", "UT"]) == ""
