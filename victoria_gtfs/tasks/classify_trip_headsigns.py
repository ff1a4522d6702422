# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Mapping, cast

from impuls import DBConnection, Task, TaskRuntime
from impuls.errors import MultipleDataErrors
from impuls.model import Trip

from ..classifier import HeadsignClassifier, strip_route_prefix
from ..cleaners import clean_trip_headsign
from ..directions import DIRECTION_LABEL_FIELD
from ..errors import UnexpectedHeadsign


class ClassifyTripHeadsigns(Task):
    """ClassifyTripHeadsigns assigns a direction label to every :py:class:`~impuls.model.Trip`
    (stored in the ``direction_label`` extra field) and cleans its headsign,
    using the provided :py:class:`~victoria_gtfs.classifier.HeadsignClassifier`.

    In strict mode, trips with unexpected headsigns cause a
    :py:exc:`~impuls.errors.MultipleDataErrors` to be raised. Otherwise, such trips
    are only logged, get a cleaned headsign and no direction label.
    """

    classifier: HeadsignClassifier
    strict: bool

    def __init__(self, classifier: HeadsignClassifier, strict: bool = True) -> None:
        super().__init__()
        self.classifier = classifier
        self.strict = strict

    def execute(self, r: TaskRuntime) -> None:
        route_short_names = get_route_short_names(r.db)
        trips = r.db.retrieve_all(Trip).all()

        classified = MultipleDataErrors.catch_all(
            "trip headsign classification",
            map(lambda trip: self.classify_trip(trip, route_short_names[trip.route_id]), trips),
            deduplicate=True,
        )

        with r.db.transaction():
            r.db.update_many(Trip, trips)

        self.logger.info(
            "Classified %d out of %d trip(s)",
            sum(1 for labelled in classified if labelled),
            len(trips),
        )

    def classify_trip(self, trip: Trip, route_short_name: str) -> bool:
        """Updates the headsign and direction label of a trip.
        Returns ``True`` if the trip was assigned a direction label."""
        direction_id = None if trip.direction is None else trip.direction.value
        try:
            c = self.classifier.classify(route_short_name, direction_id, trip.headsign)
        except UnexpectedHeadsign as e:
            if self.strict:
                raise
            self.logger.warning("%s - trip %s left without a direction", e, trip.id)
            stripped = strip_route_prefix(trip.headsign, route_short_name)
            trip.headsign = clean_trip_headsign(stripped)
            trip.set_extra_field(DIRECTION_LABEL_FIELD, None)
            return False

        trip.headsign = c.headsign
        trip.set_extra_field(DIRECTION_LABEL_FIELD, c.direction.value)
        return True


def get_route_short_names(db: DBConnection) -> Mapping[str, str]:
    """Returns a mapping from route_id to route short_name of all routes."""
    return {
        cast(str, row[0]): cast(str, row[1])
        for row in db.raw_execute("SELECT route_id, short_name FROM routes")
    }
