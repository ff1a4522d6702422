# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

import re
from pathlib import Path
from typing import Mapping, Sequence

from .cleaners import clean_trip_headsign
from .directions import ClassifiedHeadsign, DirectionRule
from .errors import UnexpectedHeadsign
from .rules import load_direction_rules


def strip_route_prefix(headsign: str, route_short_name: str) -> str:
    """Removes the route short name (and a single space after it)
    from the beginning of a headsign.

    >>> strip_route_prefix("6A Downtown", "6")
    'A Downtown'
    >>> strip_route_prefix("27 Downtown Only", "27")
    'Downtown Only'
    >>> strip_route_prefix("arb Express", "ARB")
    'Express'
    >>> strip_route_prefix("Downtown", "27")
    'Downtown'
    """
    if not route_short_name:
        return headsign
    return re.sub(f"^{re.escape(route_short_name)} ?", "", headsign, flags=re.IGNORECASE)


class HeadsignClassifier:
    """HeadsignClassifier assigns a :py:class:`~victoria_gtfs.directions.Direction`
    to trips based on their route, direction_id and raw headsign.

    Only headsigns explicitly listed in the rules are accepted; anything else
    raises :py:exc:`~victoria_gtfs.errors.UnexpectedHeadsign`.
    """

    rules: Mapping[str, Sequence[DirectionRule]]

    def __init__(self, rules: Mapping[str, Sequence[DirectionRule]]) -> None:
        self.rules = rules

    @classmethod
    def from_file(cls, path: Path | None = None) -> "HeadsignClassifier":
        return cls(load_direction_rules(path))

    def classify(
        self,
        route_short_name: str,
        direction_id: int | None,
        raw_headsign: str,
    ) -> ClassifiedHeadsign:
        headsign = strip_route_prefix(raw_headsign, route_short_name)
        for rule in self.rules.get(route_short_name, []):
            if rule.matches(direction_id, headsign):
                return ClassifiedHeadsign(rule.direction, clean_trip_headsign(headsign))
        raise UnexpectedHeadsign(route_short_name, direction_id, raw_headsign)
