"""Transcript record data structure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RecordKind(Enum):
    """Kinds of accepted room operations."""

    JOIN = "join"
    BROADCAST = "broadcast"
    DIRECT = "direct"


@dataclass(frozen=True)
class TranscriptRecord:
    """An immutable entry in the room transcript."""

    kind: RecordKind
    sender: str
    content: str = ""
    recipient: str | None = None  # only set for DIRECT
    sequence: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "sequence": self.sequence,
            "kind": self.kind.value,
            "sender": self.sender,
            "recipient": self.recipient,
            "content": self.content,
        }
