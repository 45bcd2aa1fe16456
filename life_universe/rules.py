"""Survival rule.

A :class:`Rule` is plain configuration: which living-neighbor counts keep a
live cell alive (``survive``) and which bring a dead cell to life
(``birth``). :data:`CONWAY` is the classic B3/S23 rule and the default for
every :class:`~life_universe.world.World`.

The predicate is always evaluated in its grouped form::

    (alive and count in survive) or (not alive and count in birth)

so a count shared by both sets never leaks across the alive/dead split.
"""

from dataclasses import dataclass
from typing import Dict

from pyrsistent import PSet, pset

MAX_NEIGHBORS = 8


@dataclass(frozen=True)
class Rule:
    """Life-like cellular automaton rule.

    Attributes:
        survive: Living-neighbor counts for which a live cell stays alive.
        birth: Living-neighbor counts for which a dead cell becomes alive.

    Raises:
        ValueError: If a count lies outside ``0..8``.
    """

    survive: PSet[int]
    birth: PSet[int]

    def __post_init__(self) -> None:
        for count in (*self.survive, *self.birth):
            if not 0 <= count <= MAX_NEIGHBORS:
                raise ValueError(f"Neighbor count out of range: {count}")

    def next_state(self, alive: bool, living_neighbors: int) -> bool:
        """Return whether a cell is alive in the next generation."""
        return (alive and living_neighbors in self.survive) or (
            not alive and living_neighbors in self.birth
        )

    @property
    def notation(self) -> str:
        """Birth/survival string, e.g. ``"B3/S23"``."""
        birth = "".join(str(count) for count in sorted(self.birth))
        survive = "".join(str(count) for count in sorted(self.survive))
        return f"B{birth}/S{survive}"

    @classmethod
    def from_notation(cls, notation: str) -> "Rule":
        """Parse a rule written as ``B<digits>/S<digits>``.

        Either half may be empty (``"B3/S"``) and the halves may come in any
        order. Letters are case-insensitive.

        Raises:
            ValueError: If the string is not in birth/survival notation.
        """
        parts: Dict[str, PSet[int]] = {}
        for part in notation.strip().upper().split("/"):
            prefix, digits = part[:1], part[1:]
            if prefix not in ("B", "S") or prefix in parts:
                raise ValueError(f"Invalid rule notation: {notation!r}")
            if digits and not digits.isdigit():
                raise ValueError(f"Invalid rule notation: {notation!r}")
            parts[prefix] = pset(int(digit) for digit in digits)
        if len(parts) != 2:
            raise ValueError(f"Invalid rule notation: {notation!r}")
        return cls(survive=parts["S"], birth=parts["B"])


CONWAY = Rule(survive=pset([2, 3]), birth=pset([3]))
