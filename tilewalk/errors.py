from __future__ import annotations


class TilewalkError(Exception):
    """Base class for every error raised by tilewalk."""


class UnknownModeError(TilewalkError, KeyError):
    """A transition named a mode id that is not in the registry."""

    def __init__(self, mode_id: str) -> None:
        super().__init__(mode_id)
        self.mode_id = mode_id

    def __str__(self) -> str:
        return f"no game mode registered as {self.mode_id!r}"


class OffMapError(TilewalkError, IndexError):
    """A tile was requested at a location outside the grid."""


class MapDataError(TilewalkError, ValueError):
    """Layer data or a map content file is malformed."""


class ConfigError(TilewalkError, ValueError):
    """The YAML config file has unknown keys or badly typed values."""
