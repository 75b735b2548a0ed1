"""Tests for chatroom.participants -- base forwarding and concrete variants."""

from __future__ import annotations

import pytest

from chatroom.comms.record import RecordKind
from chatroom.comms.room import ChatRoom
from chatroom.comms.sink import ListSink
from chatroom.errors import UnknownSenderError
from chatroom.participants import (
    ConsoleParticipant,
    ParticipantBase,
    RecordingParticipant,
)


@pytest.fixture
def sink() -> ListSink:
    return ListSink()


@pytest.fixture
def room(sink: ListSink) -> ChatRoom:
    return ChatRoom(sink, announce_joins=False)


class TestParticipantBase:
    """Tests for the abstract participant."""

    def test_cannot_instantiate_abstract(self, room: ChatRoom) -> None:
        with pytest.raises(TypeError):
            ParticipantBase("Alice", room)  # type: ignore[abstract]

    def test_empty_name_rejected(self, room: ChatRoom) -> None:
        with pytest.raises(ValueError):
            RecordingParticipant("", room)

    def test_name_is_read_only(self, room: ChatRoom) -> None:
        alice = RecordingParticipant("Alice", room)
        with pytest.raises(AttributeError):
            alice.name = "Mallory"  # type: ignore[misc]

    def test_send_broadcast_forwards_with_self_as_sender(self, room: ChatRoom) -> None:
        alice = RecordingParticipant("Alice", room)
        bob = RecordingParticipant("Bob", room)
        room.register(alice)
        room.register(bob)
        record = alice.send_broadcast("hello")
        assert record.kind is RecordKind.BROADCAST
        assert record.sender == "Alice"
        assert bob.inbox == [("Alice", "hello")]

    def test_send_direct_forwards(self, room: ChatRoom) -> None:
        alice = RecordingParticipant("Alice", room)
        bob = RecordingParticipant("Bob", room)
        room.register(alice)
        room.register(bob)
        record = bob.send_direct("yo", alice)
        assert record.recipient == "Alice"
        assert alice.inbox == [("Bob", "yo")]

    def test_unregistered_cannot_send(self, room: ChatRoom) -> None:
        alice = RecordingParticipant("Alice", room)
        with pytest.raises(UnknownSenderError):
            alice.send_broadcast("anyone?")

    def test_repr(self, room: ChatRoom) -> None:
        assert repr(RecordingParticipant("Alice", room)) == "RecordingParticipant(name='Alice')"


class TestConsoleParticipant:
    """Tests for the reference console variant."""

    def test_renders_to_room_sink(self, room: ChatRoom, sink: ListSink) -> None:
        alice = ConsoleParticipant("Alice", room)
        bob = ConsoleParticipant("Bob", room)
        room.register(alice)
        room.register(bob)
        alice.send_broadcast("Hola!")
        assert sink.lines == ["[Bob] received from Alice: Hola!"]

    def test_own_sink_overrides_room_sink(self, room: ChatRoom, sink: ListSink) -> None:
        own = ListSink()
        alice = ConsoleParticipant("Alice", room)
        bob = ConsoleParticipant("Bob", room, sink=own)
        room.register(alice)
        room.register(bob)
        alice.send_direct("secret", bob)
        assert own.lines == ["[Bob] received from Alice: secret"]
        assert sink.lines == []


class TestRecordingParticipant:
    """Tests for the recording variant."""

    def test_messages_from(self, room: ChatRoom) -> None:
        alice = RecordingParticipant("Alice", room)
        bob = RecordingParticipant("Bob", room)
        carol = RecordingParticipant("Carol", room)
        for p in (alice, bob, carol):
            room.register(p)
        bob.send_broadcast("one")
        carol.send_broadcast("two")
        bob.send_direct("three", alice)
        assert alice.messages_from("Bob") == ["one", "three"]
        assert alice.messages_from("Carol") == ["two"]
        assert alice.messages_from("Nobody") == []
