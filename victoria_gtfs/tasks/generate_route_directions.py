# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import cast

from impuls import Task, TaskRuntime
from impuls.model import ExtraTableRow

from ..directions import DIRECTION_LABEL_FIELD

TABLE_NAME = "route_directions.txt"
COLUMNS = ("route_id", "direction_id", "direction", "trip_headsign")


class GenerateRouteDirections(Task):
    """GenerateRouteDirections creates the ``route_directions.txt`` table
    (as :py:class:`~impuls.model.ExtraTableRow` entities), with one row for every
    distinct (route_id, direction_id, direction label, headsign) combination
    of labelled trips.

    Any rows of that table existing before are removed.
    """

    def __init__(self) -> None:
        super().__init__()

    def execute(self, r: TaskRuntime) -> None:
        rows = r.db.raw_execute(
            "SELECT DISTINCT route_id, direction, json_extract(extra_fields_json, ?) AS label, "
            "  headsign "
            "FROM trips WHERE label IS NOT NULL "
            "ORDER BY route_id, direction, label, headsign",
            (f"$.{DIRECTION_LABEL_FIELD}",),
        ).all()

        with r.db.transaction():
            r.db.raw_execute("DELETE FROM extra_table_rows WHERE table_name = ?", (TABLE_NAME,))
            r.db.create_many(
                ExtraTableRow,
                (self.to_extra_table_row(i, row) for i, row in enumerate(rows)),
            )
        self.logger.info("Generated %d route direction(s)", len(rows))

    @staticmethod
    def to_extra_table_row(sort_order: int, row: tuple[object, ...]) -> ExtraTableRow:
        route_id, direction, label, headsign = row
        extra_row = ExtraTableRow(id=0, table_name=TABLE_NAME, row_sort_order=sort_order)
        extra_row.set_fields(
            {
                "route_id": cast(str, route_id),
                "direction_id": "" if direction is None else str(direction),
                "direction": cast(str, label),
                "trip_headsign": cast(str, headsign),
            }
        )
        return extra_row
