"""Errors raised by the chat room when a caller breaks a precondition."""

from __future__ import annotations


class ChatRoomError(Exception):
    """Base class for rejected room operations.

    None of these are retryable: they signal caller misuse, and the room
    state is left exactly as it was before the call.
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class DuplicateParticipantError(ChatRoomError):
    """The participant (or another one with the same name) is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Participant {name!r} is already registered")


class UnknownSenderError(ChatRoomError):
    """The sender is not registered with this room."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Sender {name!r} is not registered")


class UnknownRecipientError(ChatRoomError):
    """The recipient of a direct message is not registered with this room."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Recipient {name!r} is not registered")


class SelfMessageError(ChatRoomError):
    """A direct message targets its own sender and the room forbids it."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Participant {name!r} cannot message themselves")


class ForeignParticipantError(ChatRoomError):
    """The participant was created for a different room."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Participant {name!r} belongs to another room")


class ConfigError(Exception):
    """A user-supplied room configuration could not be loaded."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
