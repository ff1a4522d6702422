# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class AdapterOptions:
    """AdapterOptions control how :py:class:`~victoria_gtfs.app.VictoriaGTFS`
    builds its :py:class:`~impuls.Pipeline`."""

    strict: bool = True
    """strict, when set to ``True`` (the default), causes unexpected headsigns and
    headsign merges to abort the run with :py:exc:`~impuls.errors.MultipleDataErrors`.

    When ``False``, such problems are only logged as warnings.
    """

    agency_id: Optional[str] = None
    """agency_id, if set, removes all routes of other agencies from the feed."""

    service_window_days: int = 30
    """service_window_days controls how many days (starting from today) of services
    are kept. Calendars are truncated to that window, and a run with no services
    left in the window fails.
    """

    default_route_color: str = "002C77"
    """default_route_color is used for routes without a route_color."""

    direction_rules: Optional[Path] = None
    """direction_rules overrides the YAML file with headsign → direction rules.
    Defaults to the rules shipped with the package.
    """

    merge_rules: Optional[Path] = None
    """merge_rules overrides the YAML file with headsign merge rules.
    Defaults to the rules shipped with the package.
    """
