"""Reference participant that prints what it receives."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatroom.participants.base import ParticipantBase

if TYPE_CHECKING:
    from chatroom.comms.room import ChatRoom
    from chatroom.comms.sink import Sink


class ConsoleParticipant(ParticipantBase):
    """Renders each delivery as ``[<name>] received from <sender>: <text>``.

    Output goes to *sink*, or to the room's sink when none is given.
    """

    def __init__(self, name: str, room: ChatRoom, sink: Sink | None = None) -> None:
        super().__init__(name, room)
        self._sink = sink

    @property
    def sink(self) -> Sink:
        return self._sink if self._sink is not None else self.room.sink

    def receive(self, message: str, sender: ParticipantBase) -> None:
        self.sink.notify(f"[{self.name}] received from {sender.name}: {message}")
