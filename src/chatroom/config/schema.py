"""Pydantic models for all configuration."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

ParticipantKind = Literal["console", "recording"]


class ParticipantConfig(BaseModel):
    """Configuration for a single participant."""

    name: str = Field(min_length=1)
    kind: ParticipantKind = "console"


class ScriptStep(BaseModel):
    """One scripted send: a broadcast, or a direct message when *to* is set."""

    sender: str
    text: str
    to: str | None = None


class RoomConfig(BaseModel):
    """Top-level room configuration.

    Participant names must be unique and every script step must name
    configured participants, so a validated config can always be
    replayed without room errors other than self messages.
    """

    room_name: str = "lobby"
    allow_self_messages: bool = False
    announce_joins: bool = True
    show_history: bool = True
    export_path: str | None = None
    participants: list[ParticipantConfig] = Field(
        default_factory=lambda: [
            ParticipantConfig(name="Alice"),
            ParticipantConfig(name="Bob"),
            ParticipantConfig(name="Carol"),
        ]
    )
    script: list[ScriptStep] = Field(
        default_factory=lambda: [
            ScriptStep(sender="Alice", text="Hola a todos!"),
            ScriptStep(sender="Bob", text="Hola Alice, ¿cómo estás?", to="Alice"),
            ScriptStep(sender="Carol", text="Hola grupo!"),
        ]
    )

    @field_validator("participants", mode="before")
    @classmethod
    def _expand_bare_names(cls, value: Any) -> Any:
        # ``participants: [Alice, Bob]`` is shorthand for console participants.
        if isinstance(value, list):
            return [{"name": v} if isinstance(v, str) else v for v in value]
        return value

    @model_validator(mode="after")
    def _check_names(self) -> RoomConfig:
        names: set[str] = set()
        for pc in self.participants:
            if pc.name in names:
                raise ValueError(f"duplicate participant name {pc.name!r}")
            names.add(pc.name)

        for i, step in enumerate(self.script):
            if step.sender not in names:
                raise ValueError(f"script step {i}: unknown sender {step.sender!r}")
            if step.to is not None and step.to not in names:
                raise ValueError(f"script step {i}: unknown recipient {step.to!r}")
        return self
