"""chatroom -- in-memory mediator for broadcast and direct chat messages."""

from chatroom.comms.record import RecordKind, TranscriptRecord
from chatroom.comms.room import ChatRoom
from chatroom.errors import (
    ChatRoomError,
    ConfigError,
    DuplicateParticipantError,
    ForeignParticipantError,
    SelfMessageError,
    UnknownRecipientError,
    UnknownSenderError,
)
from chatroom.participants import (
    ConsoleParticipant,
    ParticipantBase,
    RecordingParticipant,
)

__all__ = [
    "ChatRoom",
    "ChatRoomError",
    "ConfigError",
    "ConsoleParticipant",
    "DuplicateParticipantError",
    "ForeignParticipantError",
    "ParticipantBase",
    "RecordKind",
    "RecordingParticipant",
    "SelfMessageError",
    "TranscriptRecord",
    "UnknownRecipientError",
    "UnknownSenderError",
]
