"""Errors surfaced to callers of playlist operations."""


class PlaylistError(Exception):
    """Base class for rejected playlist operations."""


class NotFoundError(PlaylistError):
    """Referenced playlist, tanda, or track id does not exist."""


class InvalidArgumentError(PlaylistError, ValueError):
    """Malformed mutation input (e.g. non-integer or out-of-range index)."""
