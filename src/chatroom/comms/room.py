"""Chat room -- central hub for participant registration and message routing."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable

from chatroom.comms.record import RecordKind, TranscriptRecord
from chatroom.comms.sink import ConsoleSink
from chatroom.errors import (
    DuplicateParticipantError,
    ForeignParticipantError,
    SelfMessageError,
    UnknownRecipientError,
    UnknownSenderError,
)
from chatroom.transcript import render_record

if TYPE_CHECKING:
    from chatroom.comms.sink import Sink
    from chatroom.participants.base import ParticipantBase

logger = logging.getLogger(__name__)

RecordListener = Callable[[TranscriptRecord], None]


class ChatRoom:
    """Owns the registered participants and the ordered transcript.

    Every accepted operation appends exactly one record before any
    delivery happens; a rejected operation leaves the room untouched.
    Mutations are serialized on a re-entrant lock so participants may
    send from inside ``receive``.
    """

    def __init__(
        self,
        sink: Sink | None = None,
        *,
        name: str = "lobby",
        allow_self_messages: bool = False,
        announce_joins: bool = True,
    ) -> None:
        self.name = name
        self.sink: Sink = sink if sink is not None else ConsoleSink()
        self.allow_self_messages = allow_self_messages
        self.announce_joins = announce_joins
        self._participants: list[ParticipantBase] = []
        self._records: list[TranscriptRecord] = []
        self._listeners: list[RecordListener] = []
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, participant: ParticipantBase) -> TranscriptRecord:
        """Add *participant* and append a join record.

        Raises :class:`DuplicateParticipantError` if the same participant,
        or another one with the same name, is already registered.
        Raises :class:`ForeignParticipantError` if the participant's room
        handle points at a different room.
        """
        with self._lock:
            if participant.room is not self:
                logger.warning(
                    "Rejected %s: created for another room than %s",
                    participant.name,
                    self.name,
                )
                raise ForeignParticipantError(participant.name)
            if any(
                p is participant or p.name == participant.name
                for p in self._participants
            ):
                logger.warning(
                    "Rejected duplicate registration of %s in %s",
                    participant.name,
                    self.name,
                )
                raise DuplicateParticipantError(participant.name)

            self._participants.append(participant)
            record = self._append(RecordKind.JOIN, participant.name)
            if self.announce_joins:
                self.sink.notify(f"{participant.name} joined the chat.")
            return record

    def is_registered(self, participant: ParticipantBase) -> bool:
        """Return True if this exact participant object is registered."""
        with self._lock:
            return any(p is participant for p in self._participants)

    def participants(self) -> tuple[ParticipantBase, ...]:
        """Registered participants in registration order."""
        with self._lock:
            return tuple(self._participants)

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    def broadcast(self, message: str, sender: ParticipantBase) -> TranscriptRecord:
        """Deliver *message* to every registered participant except *sender*.

        Recipients are fixed when the call is accepted and receive the
        message in registration order.
        """
        with self._lock:
            if not self.is_registered(sender):
                logger.warning("Rejected broadcast from unknown sender %s", sender.name)
                raise UnknownSenderError(sender.name)

            record = self._append(RecordKind.BROADCAST, sender.name, message)
            targets = [p for p in self._participants if p is not sender]
            for participant in targets:
                participant.receive(message, sender)
            return record

    def send_direct(
        self,
        message: str,
        sender: ParticipantBase,
        recipient: ParticipantBase,
    ) -> TranscriptRecord:
        """Deliver *message* from *sender* to *recipient* only."""
        with self._lock:
            if not self.is_registered(sender):
                logger.warning("Rejected direct message from unknown sender %s", sender.name)
                raise UnknownSenderError(sender.name)
            if not self.is_registered(recipient):
                logger.warning(
                    "Rejected direct message from %s to unknown recipient %s",
                    sender.name,
                    recipient.name,
                )
                raise UnknownRecipientError(recipient.name)
            if sender is recipient and not self.allow_self_messages:
                logger.warning("Rejected self message from %s", sender.name)
                raise SelfMessageError(sender.name)

            record = self._append(
                RecordKind.DIRECT, sender.name, message, recipient=recipient.name
            )
            recipient.receive(message, sender)
            return record

    # ------------------------------------------------------------------
    # Transcript
    # ------------------------------------------------------------------

    def transcript(self) -> tuple[TranscriptRecord, ...]:
        """Snapshot of all records in acceptance order."""
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def show_history(self) -> None:
        """Write the rendered transcript to the sink."""
        self.sink.notify("--- History ---")
        for record in self.transcript():
            self.sink.notify(render_record(record))

    def add_listener(self, listener: RecordListener) -> None:
        """Call *listener* with every record appended from now on."""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _append(
        self,
        kind: RecordKind,
        sender: str,
        content: str = "",
        recipient: str | None = None,
    ) -> TranscriptRecord:
        record = TranscriptRecord(
            kind=kind,
            sender=sender,
            content=content,
            recipient=recipient,
            sequence=len(self._records),
        )
        self._records.append(record)
        logger.debug("%s #%d: %s", self.name, record.sequence, render_record(record))
        self._emit(record)
        return record

    def _emit(self, record: TranscriptRecord) -> None:
        """Notify all registered listeners about *record*."""
        for listener in self._listeners:
            try:
                listener(record)
            except Exception:
                logger.exception("Transcript listener raised an exception")
