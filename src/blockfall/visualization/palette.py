from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]

BACKGROUND: Color = (0, 0, 0)

# Indexed by cell value; 0 is empty and is never drawn.
PALETTE: Tuple[Color, ...] = (
    BACKGROUND,
    (0xFF, 0x0D, 0x72),  # O
    (0x0D, 0xC2, 0xFF),  # T
    (0x0D, 0xFF, 0x72),  # S
    (0xF5, 0x38, 0xFF),  # Z
    (0xFF, 0x8E, 0x0D),  # I
    (0xFF, 0xE1, 0x38),  # J
    (0x38, 0x77, 0xFF),  # L
)


def color_for_value(v: int) -> Color:
    if not 0 <= v < len(PALETTE):
        raise ValueError(f"cell value {v} has no colour")
    return PALETTE[v]
