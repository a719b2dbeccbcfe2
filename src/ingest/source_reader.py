"""Source record reader for vocabulary conversion.

This module loads affiliation records from a local JSON file.
It coalesces null or absent text fields into empty strings and
rejects every other shape mismatch as a schema error.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from core.constants import DEFAULT_SOURCE_ENCODING
from core.errors import SourceReadError, SourceSchemaError
from core.types import RawLabel, RawRecord


def read_source_records(
    source_path: str | Path,
    encoding: str = DEFAULT_SOURCE_ENCODING,
) -> list[RawRecord]:
    """Load raw records from a JSON array file.

    Args:
        source_path: Path to the source JSON file.
        encoding: Text encoding of the source file.

    Returns:
        Ordered list of raw records.

    Raises:
        SourceReadError: If the file cannot be read or parsed as JSON.
        SourceSchemaError: If the JSON does not match the record shape.
    """
    resolved_path = Path(source_path).expanduser()
    payload = _load_json_payload(resolved_path, encoding)
    return parse_source_payload(payload, str(resolved_path))


def parse_source_payload(payload: object, context: str = "source") -> list[RawRecord]:
    """Convert a decoded JSON payload into raw records.

    Args:
        payload: Decoded top-level JSON value.
        context: Source description used in error messages.

    Returns:
        Ordered list of raw records.

    Raises:
        SourceSchemaError: If the payload does not match the record shape.
    """
    if not isinstance(payload, list):
        raise SourceSchemaError(
            f"Invalid source at {context}: expected a top-level JSON array, "
            f"got {_json_type_name(payload)}. Export the registry as an array of records."
        )
    return [
        _parse_record(item, f"{context}[{index}]") for index, item in enumerate(payload)
    ]


def text_or_default(mapping: Mapping[str, object], key: str, context: str) -> str:
    """Read an optional text field, replacing null or absent with ``""``.

    Args:
        mapping: Decoded JSON object.
        key: Field name to read.
        context: Location used in error messages.

    Returns:
        Field text, or an empty string when null or absent.

    Raises:
        SourceSchemaError: If the field holds a non-string value.
    """
    value = mapping.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SourceSchemaError(
            f"Invalid field '{key}' at {context}: expected string or null, "
            f"got {_json_type_name(value)}."
        )
    return value


def _load_json_payload(source_path: Path, encoding: str) -> object:
    if not source_path.exists():
        raise SourceReadError(
            f"Failed to read source at {source_path}: path does not exist. "
            "Provide an existing JSON file."
        )
    try:
        with source_path.open("r", encoding=encoding) as source_file:
            return json.load(source_file)
    except json.JSONDecodeError as error:
        raise SourceReadError(
            f"Failed to parse JSON at {source_path}:{error.lineno}:{error.colno}: "
            f"{error.msg}. Fix the JSON syntax and retry."
        ) from error
    except UnicodeDecodeError as error:
        raise SourceReadError(
            f"Failed to decode {source_path} as {encoding}: {error.reason}. "
            "Set VOCAB_SOURCE_ENCODING to the file's encoding."
        ) from error
    except OSError as error:
        raise SourceReadError(
            f"Failed to read source at {source_path}: {error}. Check file permissions and retry."
        ) from error


def _parse_record(item: object, context: str) -> RawRecord:
    record_mapping = _expect_object(item, context)
    return RawRecord(
        record_id=text_or_default(record_mapping, "id", context),
        name=text_or_default(record_mapping, "name", context),
        labels=_parse_labels(record_mapping, context),
        acronyms=_parse_acronyms(record_mapping, context),
    )


def _parse_labels(record_mapping: Mapping[str, object], context: str) -> tuple[RawLabel, ...]:
    labels_value = _sequence_or_empty(record_mapping, "labels", context)
    labels: list[RawLabel] = []
    for index, label_item in enumerate(labels_value):
        label_context = f"{context}.labels[{index}]"
        label_mapping = _expect_object(label_item, label_context)
        labels.append(
            RawLabel(
                language_code=text_or_default(label_mapping, "iso639", label_context),
                label_text=text_or_default(label_mapping, "label", label_context),
            )
        )
    return tuple(labels)


def _parse_acronyms(record_mapping: Mapping[str, object], context: str) -> tuple[str, ...]:
    acronyms_value = _sequence_or_empty(record_mapping, "acronyms", context)
    for index, acronym in enumerate(acronyms_value):
        if not isinstance(acronym, str):
            raise SourceSchemaError(
                f"Invalid acronym at {context}.acronyms[{index}]: expected string, "
                f"got {_json_type_name(acronym)}."
            )
    return tuple(acronyms_value)


def _sequence_or_empty(mapping: Mapping[str, object], key: str, context: str) -> list[object]:
    """Read an array field, defaulting only when the key is absent."""
    if key not in mapping:
        return []
    value = mapping[key]
    if not isinstance(value, list):
        raise SourceSchemaError(
            f"Invalid field '{key}' at {context}: expected array, got {_json_type_name(value)}."
        )
    return value


def _expect_object(value: object, context: str) -> Mapping[str, object]:
    if not isinstance(value, dict):
        raise SourceSchemaError(
            f"Invalid record at {context}: expected JSON object, got {_json_type_name(value)}."
        )
    return value


def _json_type_name(value: object) -> str:
    """Return the JSON type name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
