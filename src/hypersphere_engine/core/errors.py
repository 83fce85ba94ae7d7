from __future__ import annotations


class InvalidInputError(ValueError):
    """Build parameters rejected before any generation work."""


class PointNotFoundError(KeyError):
    """Queried point is not part of the pattern."""

    def __init__(self, point: tuple[int, ...]):
        super().__init__(point)
        self.point = point

    def __str__(self) -> str:
        return f"no such point: {self.point}"
