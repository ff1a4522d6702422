# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from functools import reduce
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from .directions import MergeRule
from .errors import UnexpectedMerge
from .rules import load_merge_rules


class HeadsignMergeResolver:
    """HeadsignMergeResolver decides which headsign should be used when trips
    of the same route and direction have different (cleaned) headsigns.

    Only combinations explicitly listed in the rules are accepted; anything else
    raises :py:exc:`~victoria_gtfs.errors.UnexpectedMerge`.
    """

    rules: Mapping[str, Sequence[MergeRule]]

    def __init__(self, rules: Mapping[str, Sequence[MergeRule]]) -> None:
        self.rules = rules

    @classmethod
    def from_file(cls, path: Path | None = None) -> "HeadsignMergeResolver":
        return cls(load_merge_rules(path))

    def resolve(self, route_short_name: str, a: str, b: str) -> str:
        if a == b:
            return a

        for rule in self.rules.get(route_short_name, []):
            if rule.covers(a, b):
                return rule.canonical
        raise UnexpectedMerge(route_short_name, a, b)

    def resolve_all(self, route_short_name: str, headsigns: Iterable[str]) -> str:
        """Folds :py:meth:`resolve` over all provided headsigns, in order.
        Raises ValueError if no headsigns were provided."""
        it = iter(headsigns)
        try:
            first = next(it)
        except StopIteration:
            raise ValueError("resolve_all() requires at least one headsign") from None
        return reduce(lambda a, b: self.resolve(route_short_name, a, b), it, first)
