# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from .classify_trip_headsigns import ClassifyTripHeadsigns
from .clean_stop_names import CleanStopNames
from .fix_routes import FixRoutes
from .generate_route_directions import GenerateRouteDirections
from .merge_trip_headsigns import MergeTripHeadsigns
from .retain_routes import RetainRoutes
from .set_route_ids import SetRouteIds

__all__ = [
    "ClassifyTripHeadsigns",
    "CleanStopNames",
    "FixRoutes",
    "GenerateRouteDirections",
    "MergeTripHeadsigns",
    "RetainRoutes",
    "SetRouteIds",
]
