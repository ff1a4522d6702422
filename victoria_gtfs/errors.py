# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from impuls.errors import DataError


class InvalidRuleFile(ValueError):
    """InvalidRuleFile is raised when a direction or merge rule file
    has an unexpected structure or content."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class UnexpectedHeadsign(DataError):
    """UnexpectedHeadsign is raised when a trip's headsign is not listed
    in the direction rules of its route. New headsigns must be explicitly added
    to the rule tables, instead of being silently assigned to some direction.
    """

    route_short_name: str
    direction_id: int | None
    headsign: str

    def __init__(self, route_short_name: str, direction_id: int | None, headsign: str) -> None:
        self.route_short_name = route_short_name
        self.direction_id = direction_id
        self.headsign = headsign
        super().__init__(
            f"route {route_short_name}: unexpected headsign {headsign!r} "
            f"(direction_id {direction_id})"
        )


class UnexpectedMerge(DataError):
    """UnexpectedMerge is raised when two different headsigns of the same
    route and direction can't be merged by any of the merge rules."""

    route_short_name: str
    headsigns: tuple[str, str]

    def __init__(self, route_short_name: str, a: str, b: str) -> None:
        self.route_short_name = route_short_name
        self.headsigns = (a, b)
        super().__init__(f"route {route_short_name}: unexpected headsigns to merge {a!r} & {b!r}")


class InvalidRouteId(DataError):
    """InvalidRouteId is raised when a numeric route_id can't be derived for a route."""

    route_id: str

    def __init__(self, route_id: str, reason: str) -> None:
        self.route_id = route_id
        super().__init__(f"route {route_id}: {reason}")
