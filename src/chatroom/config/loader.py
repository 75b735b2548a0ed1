"""Room configuration loading and CLI overrides."""

from __future__ import annotations

import logging
from typing import Any

import yaml
from pydantic import ValidationError

from chatroom.config.schema import RoomConfig
from chatroom.errors import ConfigError

logger = logging.getLogger(__name__)


def load_config(path: str | None = None) -> RoomConfig:
    """Load a room configuration from a YAML file.

    Parameters
    ----------
    path:
        Path to a YAML configuration file.  If *None*, the built-in
        three-person demo is returned.

    Returns
    -------
    RoomConfig
        Parsed and validated configuration.

    Raises
    ------
    ConfigError
        If the file is missing, is not a YAML mapping, or does not
        describe a valid room.
    """
    if path is None:
        logger.debug("No config path provided, using the built-in demo")
        return RoomConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(path, "file not found") from None
    except yaml.YAMLError as exc:
        raise ConfigError(path, f"invalid YAML ({exc})") from exc

    if data is None:
        logger.info("Config file %s is empty, using the built-in demo", path)
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")

    config = _validate(path, data)
    logger.debug(
        "Loaded room %s from %s: %d participant(s), %d script step(s)",
        config.room_name,
        path,
        len(config.participants),
        len(config.script),
    )
    return config


def merge_configs(base: RoomConfig, overrides: dict[str, Any]) -> RoomConfig:
    """Return a copy of *base* with top-level *overrides* applied.

    The result is validated again, so an override can not sneak an
    inconsistent room past the schema.
    """
    return _validate("overrides", {**base.model_dump(), **overrides})


def _validate(source: str, data: dict[str, Any]) -> RoomConfig:
    try:
        return RoomConfig.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'room'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigError(source, problems) from exc
