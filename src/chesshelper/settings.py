"""User-configurable settings for the move helper."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesshelper.moves.keyboard import DEFAULT_KEY_BINDINGS, KeyBinding


@dataclass
class HelperSettings:
    """All user-configurable settings."""

    # Keyboard: key → (piece, direction) for pointer + key moves
    key_bindings: dict[str, KeyBinding] = field(
        default_factory=lambda: dict(DEFAULT_KEY_BINDINGS)
    )

    # Board
    show_preview: bool = True  # arrows / areas while typing
