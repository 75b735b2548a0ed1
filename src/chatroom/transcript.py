"""Rendering and export of room transcripts."""

from __future__ import annotations

import json
import logging
import os
from typing import Iterable

from chatroom.comms.record import RecordKind, TranscriptRecord

logger = logging.getLogger(__name__)


def render_record(record: TranscriptRecord) -> str:
    """Render one record as a history line."""
    if record.kind is RecordKind.JOIN:
        return f"SYSTEM: {record.sender} joined the chat."
    if record.kind is RecordKind.BROADCAST:
        return f"{record.sender} -> ALL: {record.content}"
    return f"{record.sender} -> {record.recipient}: {record.content}"


def render_transcript(records: Iterable[TranscriptRecord]) -> list[str]:
    return [render_record(r) for r in records]


def export_json(records: Iterable[TranscriptRecord], output_path: str) -> None:
    """Write *records* to a pretty-printed JSON file.

    Parameters
    ----------
    records:
        Transcript records, usually ``room.transcript()``.
    output_path:
        File path for the output JSON file.  Missing parent directories
        are created.
    """
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    payload = [r.to_dict() for r in records]
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)

    logger.info("Transcript (%d records) exported to %s", len(payload), output_path)
