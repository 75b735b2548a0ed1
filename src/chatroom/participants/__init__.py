"""Participant variants that can join a chat room."""

from chatroom.participants.base import ParticipantBase
from chatroom.participants.console import ConsoleParticipant
from chatroom.participants.recording import RecordingParticipant

__all__ = [
    "ConsoleParticipant",
    "ParticipantBase",
    "RecordingParticipant",
]
