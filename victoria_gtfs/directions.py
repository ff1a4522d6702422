# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Direction is the cardinal or rotational label of a trip,
    independent of the GTFS direction_id."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"
    INBOUND = "inbound"
    OUTBOUND = "outbound"

    @classmethod
    def by_name(cls, name: str) -> "Direction":
        """Returns a Direction by its (case-insensitive) name.

        >>> Direction.by_name("north")
        <Direction.NORTH: 'north'>
        >>> Direction.by_name("CounterClockwise")
        <Direction.COUNTERCLOCKWISE: 'counterclockwise'>
        >>> Direction.by_name("up")
        Traceback (most recent call last):
        ...
        ValueError: unknown direction: 'up'
        """
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown direction: {name!r}") from None


@dataclass(frozen=True)
class DirectionRule:
    """DirectionRule assigns a :py:class:`Direction` to trips with one of the
    listed headsigns."""

    direction_id: int | None
    """GTFS direction_id of matching trips. ``None`` matches trips in any direction."""

    direction: Direction

    headsigns: tuple[str, ...]
    """Accepted raw headsigns, with the route short name prefix already removed."""

    def matches(self, direction_id: int | None, headsign: str) -> bool:
        if self.direction_id is not None and self.direction_id != direction_id:
            return False
        return headsign in self.headsigns


@dataclass(frozen=True)
class MergeRule:
    """MergeRule allows any two of its headsigns to collapse into the canonical one."""

    headsigns: frozenset[str]
    canonical: str

    def covers(self, a: str, b: str) -> bool:
        return a in self.headsigns and b in self.headsigns


@dataclass(frozen=True)
class ClassifiedHeadsign:
    direction: Direction
    headsign: str


DIRECTION_LABEL_FIELD = "direction_label"
"""Name of the :py:class:`~impuls.model.Trip` extra field holding
the :py:attr:`Direction.value` assigned to the trip."""
