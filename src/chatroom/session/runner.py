"""Single-session runner: build a room from config and play its script."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from chatroom.comms.room import ChatRoom
from chatroom.config.schema import RoomConfig
from chatroom.participants import ConsoleParticipant, RecordingParticipant
from chatroom.transcript import export_json

if TYPE_CHECKING:
    from chatroom.comms.record import TranscriptRecord
    from chatroom.comms.sink import Sink
    from chatroom.participants.base import ParticipantBase

logger = logging.getLogger(__name__)

_PARTICIPANT_KINDS: dict[str, type[ParticipantBase]] = {
    "console": ConsoleParticipant,
    "recording": RecordingParticipant,
}


@dataclass
class SessionResult:
    """Result of a single session."""

    session_id: str
    config: RoomConfig
    room: ChatRoom
    transcript: tuple[TranscriptRecord, ...]
    duration: float
    participants: dict[str, ParticipantBase] = field(default_factory=dict)


class SessionRunner:
    """Runs one scripted chat session from config to completion.

    Registers the configured participants in order, replays the script
    step by step, then optionally prints the history and exports the
    transcript.  The config is expected to be validated, so every
    script step names a configured participant.  Room errors propagate
    to the caller unchanged.
    """

    def __init__(
        self,
        config: RoomConfig,
        sink: Sink | None = None,
        extra_listeners: list[Any] | None = None,
    ) -> None:
        self.config = config
        self.sink = sink
        self.extra_listeners = extra_listeners or []

    def run(self) -> SessionResult:
        """Execute the session and return the result."""
        session_id = str(uuid.uuid4())
        start_time = time.monotonic()
        cfg = self.config

        logger.info("Starting session %s (%s)", session_id, cfg.room_name)

        room = ChatRoom(
            self.sink,
            name=cfg.room_name,
            allow_self_messages=cfg.allow_self_messages,
            announce_joins=cfg.announce_joins,
        )
        for listener in self.extra_listeners:
            room.add_listener(listener)

        by_name: dict[str, ParticipantBase] = {}
        for pc in cfg.participants:
            participant = _create_participant(pc.kind, pc.name, room)
            room.register(participant)
            by_name[participant.name] = participant

        for step in cfg.script:
            sender = by_name[step.sender]
            if step.to is None:
                sender.send_broadcast(step.text)
                continue
            sender.send_direct(step.text, by_name[step.to])

        if cfg.show_history:
            room.show_history()
        if cfg.export_path:
            export_json(room.transcript(), cfg.export_path)

        duration = time.monotonic() - start_time
        logger.info(
            "Session %s finished: %d records in %.3fs",
            session_id,
            len(room),
            duration,
        )
        return SessionResult(
            session_id=session_id,
            config=cfg,
            room=room,
            transcript=room.transcript(),
            duration=duration,
            participants=by_name,
        )


def _create_participant(kind: str, name: str, room: ChatRoom) -> ParticipantBase:
    """Instantiate the participant variant registered under *kind*."""
    return _PARTICIPANT_KINDS[kind](name, room)
