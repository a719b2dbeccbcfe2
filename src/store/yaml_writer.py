"""YAML writer for converted vocabulary records.

This module serializes target records into one YAML list document.
The file starts with a UTF-8 byte-order marker for downstream tooling.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import yaml

from core.constants import DESTINATION_ENCODING, UTF8_BOM
from core.errors import DestinationWriteError
from core.types import TargetRecord
from store.record_payload import target_record_to_payload


def write_target_records(records: Iterable[TargetRecord], destination_path: str | Path) -> Path:
    """Write target records to a BOM-prefixed YAML file.

    Args:
        records: Target records in output order.
        destination_path: File to create or overwrite.

    Returns:
        Path of the written file.

    Raises:
        DestinationWriteError: If the file cannot be created or written.
    """
    resolved_path = Path(destination_path).expanduser()
    document = render_yaml_document(records)
    try:
        with resolved_path.open("wb") as destination_file:
            destination_file.write(UTF8_BOM)
            destination_file.write(document.encode(DESTINATION_ENCODING))
    except OSError as error:
        raise DestinationWriteError(
            f"Failed to write destination at {resolved_path}: {error}. "
            "Check that the parent directory exists and is writable."
        ) from error
    return resolved_path


def render_yaml_document(records: Iterable[TargetRecord]) -> str:
    """Render target records as a YAML list document without the BOM.

    Args:
        records: Target records in output order.

    Returns:
        YAML text.
    """
    payload = [target_record_to_payload(record) for record in records]
    return yaml.safe_dump(
        payload,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=False,
    )
