"""Shared payload serialization for TargetRecord values.

This module centralizes the mapping from target records to plain
YAML-safe structures with a fixed key order.
"""

from __future__ import annotations

from core.types import Identifier, TargetRecord


def target_record_to_payload(record: TargetRecord) -> dict[str, object]:
    """Serialize a TargetRecord into a YAML-safe payload.

    Args:
        record: Target record instance.

    Returns:
        Ordered dictionary payload. The ``acronym`` key is omitted
        when the record has no acronym.
    """
    payload: dict[str, object] = {
        "id": record.record_id,
        "name": record.name,
        "title": dict(record.title),
        "identifiers": [identifier_to_payload(identifier) for identifier in record.identifiers],
    }
    if record.acronym is not None:
        payload["acronym"] = record.acronym
    return payload


def identifier_to_payload(identifier: Identifier) -> dict[str, str]:
    """Serialize one Identifier into a payload mapping."""
    return {"identifier": identifier.identifier, "scheme": identifier.scheme}
