"""Position - immutable grid coordinate shared by every entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A (column, row) cell in the play area.  Row 0 is the top edge."""

    x: int
    y: int

    def up(self) -> Position:
        """One row higher, saturating at the top edge."""
        return Position(self.x, max(0, self.y - 1))

    def shifted(self, dx: int = 0, dy: int = 0) -> Position:
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}
