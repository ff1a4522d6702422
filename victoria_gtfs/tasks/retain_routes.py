# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Optional

from impuls import Task, TaskRuntime
from impuls.model import Route


class RetainRoutes(Task):
    """RetainRoutes removes :py:class:`Routes <impuls.model.Route>` which don't
    belong in the feed:

    * routes of other agencies, if ``agency_id`` is provided,
    * routes with a type other than ``route_type``, if it is provided.

    Trips (and everything depending on them) are removed with their routes.
    Run :py:class:`~impuls.tasks.RemoveUnusedEntities` afterwards to clean up
    unreferenced stops and calendars.
    """

    agency_id: Optional[str]
    route_type: Optional[Route.Type]

    def __init__(
        self,
        agency_id: Optional[str] = None,
        route_type: Optional[Route.Type] = Route.Type.BUS,
    ) -> None:
        super().__init__()
        self.agency_id = agency_id
        self.route_type = route_type

    def execute(self, r: TaskRuntime) -> None:
        with r.db.transaction():
            if self.agency_id is not None:
                result = r.db.raw_execute(
                    "DELETE FROM routes WHERE agency_id != ?",
                    (self.agency_id,),
                )
                self.logger.info("Dropped %d route(s) of other agencies", result.rowcount)

            if self.route_type is not None:
                result = r.db.raw_execute(
                    "DELETE FROM routes WHERE type != ?",
                    (self.route_type.value,),
                )
                self.logger.info(
                    "Dropped %d route(s) with type other than %s",
                    result.rowcount,
                    self.route_type.name,
                )
