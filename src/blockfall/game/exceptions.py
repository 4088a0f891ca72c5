from __future__ import annotations


class BlockfallError(Exception):
    """Base class for engine defects."""


class InvalidPlacementError(BlockfallError):
    """A write targeted a cell outside the board or an occupied cell.

    Gameplay never triggers this: every positional change is validated by
    the collision detector first, so seeing it means a caller skipped that
    check.
    """
