# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from collections import defaultdict
from typing import Iterable, cast

from impuls import Task, TaskRuntime
from impuls.errors import MultipleDataErrors

from ..directions import DIRECTION_LABEL_FIELD
from ..errors import UnexpectedMerge
from ..merger import HeadsignMergeResolver
from .classify_trip_headsigns import get_route_short_names

GroupKey = tuple[str, str]
"""(route_id, direction label)"""

HeadsignCounts = list[tuple[str, int]]
"""(headsign, number of trips), ordered by descending count and then by headsign"""


class MergeTripHeadsigns(Task):
    """MergeTripHeadsigns ensures all trips of a route with the same direction label
    share the same headsign. Differing headsigns are resolved with the provided
    :py:class:`~victoria_gtfs.merger.HeadsignMergeResolver`, starting from the most
    common one.

    Trips without a direction label (see :py:class:`ClassifyTripHeadsigns`) are ignored.

    In strict mode, unexpected merges cause a :py:exc:`~impuls.errors.MultipleDataErrors`
    to be raised. Otherwise, they are logged and the most common headsign is used.
    """

    resolver: HeadsignMergeResolver
    strict: bool

    def __init__(self, resolver: HeadsignMergeResolver, strict: bool = True) -> None:
        super().__init__()
        self.resolver = resolver
        self.strict = strict

    def execute(self, r: TaskRuntime) -> None:
        route_short_names = get_route_short_names(r.db)
        groups = self.get_headsign_groups(
            r.db.raw_execute(
                "SELECT route_id, json_extract(extra_fields_json, ?) AS label, headsign, COUNT(*) "
                "FROM trips WHERE label IS NOT NULL "
                "GROUP BY route_id, label, headsign",
                (f"$.{DIRECTION_LABEL_FIELD}",),
            )
        )

        to_merge = [
            (route_id, label, route_short_names[route_id], headsigns)
            for (route_id, label), headsigns in groups.items()
            if len(headsigns) > 1
        ]
        merged = MultipleDataErrors.catch_all(
            "trip headsign merging",
            map(
                lambda i: ((i[0], i[1]), self.pick_headsign(i[2], i[3])),
                to_merge,
            ),
        )

        with r.db.transaction():
            result = r.db.raw_execute_many(
                "UPDATE trips SET headsign = ? WHERE route_id = ? "
                "AND json_extract(extra_fields_json, ?) = ? AND headsign != ?",
                (
                    (headsign, route_id, f"$.{DIRECTION_LABEL_FIELD}", label, headsign)
                    for (route_id, label), headsign in merged
                ),
            )
        self.logger.info(
            "Merged headsigns of %d trip(s) in %d route direction(s)",
            result.rowcount,
            len(merged),
        )

    @staticmethod
    def get_headsign_groups(rows: Iterable[tuple[object, ...]]) -> dict[GroupKey, HeadsignCounts]:
        groups = defaultdict[GroupKey, HeadsignCounts](list)
        for route_id, label, headsign, count in rows:
            groups[cast(str, route_id), cast(str, label)].append(
                (cast(str, headsign), cast(int, count))
            )
        for headsigns in groups.values():
            headsigns.sort(key=lambda i: (-i[1], i[0]))
        return groups

    def pick_headsign(self, route_short_name: str, headsigns: HeadsignCounts) -> str:
        try:
            merged = self.resolver.resolve_all(route_short_name, (i[0] for i in headsigns))
        except UnexpectedMerge as e:
            if self.strict:
                raise
            merged = headsigns[0][0]
            self.logger.warning("%s - using the most common headsign %r", e, merged)

        self.logger.debug(
            "Route %s: merged %s into %r",
            route_short_name,
            ", ".join(repr(i[0]) for i in headsigns),
            merged,
        )
        return merged
