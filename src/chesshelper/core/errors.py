"""Programming-error signals, kept apart from normal input outcomes."""

from __future__ import annotations


class PreconditionError(RuntimeError):
    """A caller broke a usage contract of the move-input core."""


class PieceMapNotInitializedError(PreconditionError):
    """The directional piece map was queried before it was built."""


class UnsupportedPieceError(PreconditionError):
    """Directional addressing was requested for an untracked piece kind."""
