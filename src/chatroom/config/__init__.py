"""Configuration loading and validation."""

from chatroom.config.schema import ParticipantConfig, RoomConfig, ScriptStep
from chatroom.config.loader import load_config, merge_configs

__all__ = [
    "ParticipantConfig",
    "RoomConfig",
    "ScriptStep",
    "load_config",
    "merge_configs",
]
