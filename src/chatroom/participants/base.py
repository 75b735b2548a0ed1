"""Abstract base class for all chat participants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chatroom.comms.record import TranscriptRecord
    from chatroom.comms.room import ChatRoom


class ParticipantBase(ABC):
    """Interface that every participant variant must implement.

    A participant holds a non-owning handle to the room it talks
    through; the room alone decides who is registered.  Subclasses only
    have to provide :meth:`receive`.
    """

    def __init__(self, name: str, room: ChatRoom) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("Participant name must be a non-empty string")
        self._name = name
        self.room = room

    @property
    def name(self) -> str:
        """Display name, fixed at construction."""
        return self._name

    @abstractmethod
    def receive(self, message: str, sender: ParticipantBase) -> None:
        """Handle a message delivered by the room.

        Parameters
        ----------
        message:
            The message text.
        sender:
            The participant that sent it.
        """
        ...

    # ------------------------------------------------------------------
    # Sending (pure forwarding to the room)
    # ------------------------------------------------------------------

    def send_broadcast(self, message: str) -> TranscriptRecord:
        """Broadcast *message* to everyone else in the room."""
        return self.room.broadcast(message, self)

    def send_direct(self, message: str, to: ParticipantBase) -> TranscriptRecord:
        """Send *message* to a single participant."""
        return self.room.send_direct(message, self, to)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
