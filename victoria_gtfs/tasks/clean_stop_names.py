# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import cast

from impuls import Task, TaskRuntime

from ..cleaners import clean_stop_name


class CleanStopNames(Task):
    """CleanStopNames applies :py:func:`~victoria_gtfs.cleaners.clean_stop_name`
    to names of all stops."""

    def __init__(self) -> None:
        super().__init__()

    def execute(self, r: TaskRuntime) -> None:
        changes = list[tuple[str, str]]()
        for row in r.db.raw_execute("SELECT stop_id, name FROM stops"):
            stop_id = cast(str, row[0])
            name = cast(str, row[1])
            cleaned = clean_stop_name(name)
            if cleaned != name:
                changes.append((cleaned, stop_id))

        with r.db.transaction():
            r.db.raw_execute_many("UPDATE stops SET name = ? WHERE stop_id = ?", changes)
        self.logger.info("Cleaned names of %d stop(s)", len(changes))
