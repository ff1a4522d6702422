# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

import re
from typing import cast

from impuls import Task, TaskRuntime
from impuls.errors import MultipleDataErrors

from ..errors import InvalidRouteId

DIGITS_ONLY = re.compile(r"[0-9]+")

SPECIAL_ROUTE_IDS = {"ARB": "999"}
"""Route IDs for routes whose short names are not numeric."""


def derive_route_id(route_id: str, short_name: str) -> str:
    """Returns a numeric route ID for a route. Already numeric IDs are kept;
    otherwise the ID is derived from the short name.

    >>> derive_route_id("12", "12")
    '12'
    >>> derive_route_id("4-VIC", "4")
    '4'
    >>> derive_route_id("ARB-VIC", "arb")
    '999'
    >>> derive_route_id("X-VIC", "X")
    Traceback (most recent call last):
    ...
    victoria_gtfs.errors.InvalidRouteId: route X-VIC: can't derive a numeric ID from short name 'X'
    """
    if DIGITS_ONLY.fullmatch(route_id):
        return route_id

    special = SPECIAL_ROUTE_IDS.get(short_name.upper())
    if special is not None:
        return special
    elif DIGITS_ONLY.fullmatch(short_name):
        return str(int(short_name))
    raise InvalidRouteId(route_id, f"can't derive a numeric ID from short name {short_name!r}")


class SetRouteIds(Task):
    """SetRouteIds replaces non-numeric route IDs by IDs derived from route short names
    (see :py:func:`derive_route_id`). References from other tables are updated
    through ``ON UPDATE CASCADE``.

    Raises :py:exc:`~impuls.errors.MultipleDataErrors` if any ID can't be derived,
    or if multiple routes would end up with the same ID.
    """

    def __init__(self) -> None:
        super().__init__()

    def execute(self, r: TaskRuntime) -> None:
        routes = [
            (cast(str, i[0]), cast(str, i[1]))
            for i in r.db.raw_execute("SELECT route_id, short_name FROM routes")
        ]
        new_ids = MultipleDataErrors.catch_all(
            "route ID derivation",
            map(self.derive_id, routes),
        )
        self.check_for_duplicates(new_ids)

        changes = [(new_id, old_id) for old_id, new_id in new_ids if new_id != old_id]
        with r.db.transaction():
            r.db.raw_execute_many("UPDATE routes SET route_id = ? WHERE route_id = ?", changes)
        self.logger.info("Changed IDs of %d route(s)", len(changes))

    def derive_id(self, route: tuple[str, str]) -> tuple[str, str]:
        route_id, short_name = route
        new_id = derive_route_id(route_id, short_name)
        if new_id != route_id:
            self.logger.debug("Route %s (%s) → %s", route_id, short_name, new_id)
        return route_id, new_id

    @staticmethod
    def check_for_duplicates(new_ids: list[tuple[str, str]]) -> None:
        seen: dict[str, str] = {}
        errors: list[InvalidRouteId] = []
        for old_id, new_id in new_ids:
            if new_id in seen:
                reason = f"derived ID {new_id} is already used by {seen[new_id]}"
                errors.append(InvalidRouteId(old_id, reason))
            else:
                seen[new_id] = old_id
        if errors:
            raise MultipleDataErrors("route ID derivation", list(errors))
