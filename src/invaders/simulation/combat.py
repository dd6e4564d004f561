"""Combat - bullet flight, hit detection, and kill resolution.

Architecture
------------
Bullets are plain Positions in firing order.  Each tick:

  1. ``advance_bullets()`` moves every bullet one row up (saturating at the
     top edge) and drops the ones that reached row 0.

  2. ``resolve_hits()`` pairs each surviving bullet with the first enemy
     sharing its exact cell.  A matched enemy is counted once even when
     several bullets sit on it.  Removal happens after the whole bullet pass
     as a single filter over the pre-removal enemy list, so matched indices
     stay valid.

A bullet that scores is not consumed: it stays in the bullet list and keeps
climbing on the next tick.

The fire-rate cap (``MAX_BULLETS``) is enforced by ``can_fire()``; the engine
checks it before appending a new bullet.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .position import Position

# Live bullets allowed at once
MAX_BULLETS = 3

# Points awarded per destroyed enemy
KILL_POINTS = 10


@dataclass
class HitReport:
    """Outcome of one collision pass."""

    survivors: list[Position]
    destroyed: list[Position] = field(default_factory=list)

    @property
    def kills(self) -> int:
        return len(self.destroyed)

    @property
    def points(self) -> int:
        return self.kills * KILL_POINTS


def can_fire(bullets: list[Position]) -> bool:
    return len(bullets) < MAX_BULLETS


def muzzle_position(player: Position) -> Position:
    """Where a freshly fired bullet appears: one row above the player."""
    return player.up()


def advance_bullets(bullets: list[Position]) -> list[Position]:
    """Move every bullet up one row and discard those that left the top."""
    moved = [b.up() for b in bullets]
    return [b for b in moved if b.y > 0]


def resolve_hits(bullets: list[Position], enemies: list[Position]) -> HitReport:
    """Match bullets to enemies on the same cell and remove the hit enemies."""
    hit_indices: set[int] = set()
    for bullet in bullets:
        for idx, enemy in enumerate(enemies):
            if enemy == bullet:
                hit_indices.add(idx)
                break

    if not hit_indices:
        return HitReport(survivors=list(enemies))

    survivors = [e for i, e in enumerate(enemies) if i not in hit_indices]
    destroyed = [enemies[i] for i in sorted(hit_indices)]
    return HitReport(survivors=survivors, destroyed=destroyed)
