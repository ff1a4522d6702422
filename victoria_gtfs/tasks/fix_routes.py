# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from impuls import Task, TaskRuntime
from impuls.model import Route
from impuls.tools.color import text_color_for

from ..cleaners import clean_route_long_name


class FixRoutes(Task):
    """FixRoutes normalizes :py:class:`Routes <impuls.model.Route>`:

    * long names are cleaned with :py:func:`~victoria_gtfs.cleaners.clean_route_long_name`,
    * missing colors are replaced by ``default_color``,
    * missing text colors are picked to contrast with the route color,
    * the route type is set to bus.
    """

    default_color: str

    def __init__(self, default_color: str = "002C77") -> None:
        super().__init__()
        self.default_color = default_color

    def execute(self, r: TaskRuntime) -> None:
        routes = r.db.retrieve_all(Route).all()
        for route in routes:
            self.fix_route(route)

        with r.db.transaction():
            r.db.update_many(Route, routes)
        self.logger.info("Fixed %d route(s)", len(routes))

    def fix_route(self, route: Route) -> None:
        route.long_name = clean_route_long_name(route.long_name)
        if not route.color:
            self.logger.debug("Route %s has no color, using %s", route.id, self.default_color)
            route.color = self.default_color
        if not route.text_color:
            route.text_color = text_color_for(route.color)
        route.type = Route.Type.BUS
