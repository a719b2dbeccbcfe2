"""Unit tests for vocabulary kind dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import VocabConfig
from core.errors import UnknownVocabularyError, UnsupportedVocabularyError
from core.vocabulary import (
    SUPPORTED_VOCABULARY_KINDS,
    convert_vocabulary,
    is_implemented,
    parse_vocabulary_kind,
)
from tests.fixture_paths import fixture_path


def test_parse_vocabulary_kind_is_case_insensitive() -> None:
    """Kind names should be lower-cased before validation."""
    assert parse_vocabulary_kind("Affiliations") == "affiliations"


def test_parse_vocabulary_kind_does_not_strip_whitespace() -> None:
    """Kind names should only be lower-cased, not trimmed."""
    with pytest.raises(UnknownVocabularyError):
        parse_vocabulary_kind(" affiliations ")


def test_parse_vocabulary_kind_rejects_unknown_kind() -> None:
    """Kinds outside the closed set should be rejected."""
    with pytest.raises(UnknownVocabularyError, match="Unknown vocabulary type: grants"):
        parse_vocabulary_kind("grants")


def test_only_affiliations_are_implemented() -> None:
    """The four placeholder kinds should be declared but unimplemented."""
    implemented = [kind for kind in SUPPORTED_VOCABULARY_KINDS if is_implemented(kind)]

    assert implemented == ["affiliations"]


@pytest.mark.parametrize("kind", ["names", "funding", "awards", "subjects"])
def test_convert_vocabulary_raises_for_placeholder_kinds(kind: str, tmp_path: Path) -> None:
    """Placeholder kinds should fail without writing output."""
    destination = tmp_path / "out.yaml"

    with pytest.raises(UnsupportedVocabularyError, match="not yet implemented"):
        convert_vocabulary(
            parse_vocabulary_kind(kind),
            fixture_path("affiliations/sample.json"),
            destination,
            VocabConfig(),
        )

    assert destination.exists() is False


def test_convert_vocabulary_runs_affiliations(tmp_path: Path) -> None:
    """Affiliations should dispatch to the conversion pipeline."""
    destination = tmp_path / "out.yaml"

    summary = convert_vocabulary(
        "affiliations", fixture_path("affiliations/sample.json"), destination, VocabConfig()
    )

    assert summary.output_count == 3 and destination.exists()
