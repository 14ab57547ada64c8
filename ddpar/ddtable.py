"""The double-dummy trick table: tricks per strain and declarer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

STRAINS = 5
HANDS = 4


@dataclass(frozen=True)
class DDTable:
    """Tricks by strain (S, H, D, C, NT) and declarer (N, E, S, W)."""

    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(int(v) for v in row) for row in self.rows)
        if len(rows) != STRAINS or any(len(row) != HANDS for row in rows):
            raise ValueError("a trick table has 5 strains of 4 hands")
        if any(not 0 <= v <= 13 for row in rows for v in row):
            raise ValueError("trick counts must lie in 0 .. 13")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_flat(cls, values: Iterable[int]) -> DDTable:
        """Build a table from 20 values ordered strain by strain."""
        values = list(values)
        if len(values) != STRAINS * HANDS:
            raise ValueError("a flat trick table has 20 values")
        return cls(tuple(
            tuple(values[HANDS * strain:HANDS * (strain + 1)])
            for strain in range(STRAINS)
        ))

    def tricks(self, strain: int, hand: int) -> int:
        """Tricks that ``hand`` takes as declarer in ``strain``."""
        return self.rows[strain][hand]

    def row(self, strain: int) -> tuple[int, ...]:
        """The tricks of all four declarers in ``strain``."""
        return self.rows[strain]