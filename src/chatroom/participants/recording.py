"""Participant that keeps every delivery for later inspection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chatroom.participants.base import ParticipantBase

if TYPE_CHECKING:
    from chatroom.comms.room import ChatRoom

logger = logging.getLogger(__name__)


class RecordingParticipant(ParticipantBase):
    """Stores ``(sender_name, message)`` pairs in :attr:`inbox`."""

    def __init__(self, name: str, room: ChatRoom) -> None:
        super().__init__(name, room)
        self.inbox: list[tuple[str, str]] = []

    def receive(self, message: str, sender: ParticipantBase) -> None:
        logger.debug("%s received from %s", self.name, sender.name)
        self.inbox.append((sender.name, message))

    def messages_from(self, sender_name: str) -> list[str]:
        """Return the messages received from *sender_name*, oldest first."""
        return [msg for who, msg in self.inbox if who == sender_name]
