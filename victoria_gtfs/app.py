# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from argparse import ArgumentParser, Namespace
from dataclasses import replace
from pathlib import Path

from impuls import App, HTTPResource, LocalResource, Pipeline, PipelineOptions, Resource
from impuls.model import Date
from impuls.tasks import LoadGTFS, RemoveUnusedEntities, SaveGTFS, TruncateCalendars
from impuls.tools.temporal import BoundedDateRange

from .classifier import HeadsignClassifier
from .merger import HeadsignMergeResolver
from .options import AdapterOptions
from .tasks import (
    ClassifyTripHeadsigns,
    CleanStopNames,
    FixRoutes,
    GenerateRouteDirections,
    MergeTripHeadsigns,
    RetainRoutes,
    SetRouteIds,
)
from .tasks.generate_route_directions import COLUMNS as ROUTE_DIRECTIONS_COLUMNS

INPUT_RESOURCE_NAME = "victoria.zip"

GTFS_HEADERS = {
    "agency.txt": (
        "agency_id",
        "agency_name",
        "agency_url",
        "agency_timezone",
        "agency_lang",
        "agency_phone",
    ),
    "stops.txt": (
        "stop_id",
        "stop_code",
        "stop_name",
        "stop_lat",
        "stop_lon",
    ),
    "routes.txt": (
        "agency_id",
        "route_id",
        "route_short_name",
        "route_long_name",
        "route_type",
        "route_color",
        "route_text_color",
    ),
    "trips.txt": (
        "route_id",
        "service_id",
        "trip_id",
        "trip_headsign",
        "direction_id",
    ),
    "stop_times.txt": (
        "trip_id",
        "stop_sequence",
        "stop_id",
        "arrival_time",
        "departure_time",
    ),
    "calendar.txt": (
        "service_id",
        "start_date",
        "end_date",
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sunday",
    ),
    "calendar_dates.txt": (
        "service_id",
        "date",
        "exception_type",
    ),
    "route_directions.txt": ROUTE_DIRECTIONS_COLUMNS,
}


def get_input_resource(input: str) -> Resource:
    """Returns a :py:class:`~impuls.Resource` for the input GTFS -
    either a remote one (for http and https URLs), or a local file."""
    if input.startswith(("http://", "https://")):
        return HTTPResource.get(input)
    return LocalResource(input)


class VictoriaGTFS(App):
    """VictoriaGTFS converts the Victoria Regional Transit System GTFS into
    a cleaned-up GTFS, written to ``<output_dir>/<prefix>gtfs.zip``."""

    adapter_options: AdapterOptions

    def __init__(
        self,
        adapter_options: AdapterOptions = AdapterOptions(),
        workspace_directory: Path = Path("_workspace_victoria"),
    ) -> None:
        super().__init__(name="victoria_gtfs", workspace_directory=workspace_directory)
        self.adapter_options = adapter_options

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("input", help="path or URL of the input GTFS zip")
        parser.add_argument("output_dir", type=Path, help="directory for the output GTFS")
        parser.add_argument(
            "prefix",
            nargs="?",
            default="",
            help="prefix of the output file name (default: none)",
        )
        parser.add_argument(
            "--lenient",
            action="store_true",
            help="only warn about unexpected headsigns and headsign merges",
        )
        parser.add_argument(
            "--agency-id",
            default=None,
            help="only keep routes of the agency with this ID",
        )
        parser.add_argument(
            "--days",
            type=int,
            default=None,
            help=(
                "number of days of services to keep "
                f"(default: {self.adapter_options.service_window_days})"
            ),
        )

    def get_adapter_options(self, args: Namespace) -> AdapterOptions:
        options = self.adapter_options
        if args.lenient:
            options = replace(options, strict=False)
        if args.agency_id is not None:
            options = replace(options, agency_id=args.agency_id)
        if args.days is not None:
            options = replace(options, service_window_days=args.days)
        return options

    def prepare(self, args: Namespace, options: PipelineOptions) -> Pipeline:
        adapter = self.get_adapter_options(args)
        output_dir: Path = args.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)

        today = Date.today()
        return Pipeline(
            options=options,
            tasks=[
                LoadGTFS(INPUT_RESOURCE_NAME),
                TruncateCalendars(
                    BoundedDateRange(today, today.add_days(adapter.service_window_days))
                ),
                RetainRoutes(agency_id=adapter.agency_id),
                RemoveUnusedEntities(),
                SetRouteIds(),
                FixRoutes(adapter.default_route_color),
                CleanStopNames(),
                ClassifyTripHeadsigns(
                    HeadsignClassifier.from_file(adapter.direction_rules),
                    strict=adapter.strict,
                ),
                MergeTripHeadsigns(
                    HeadsignMergeResolver.from_file(adapter.merge_rules),
                    strict=adapter.strict,
                ),
                GenerateRouteDirections(),
                SaveGTFS(GTFS_HEADERS, output_dir / f"{args.prefix}gtfs.zip"),
            ],
            resources={INPUT_RESOURCE_NAME: get_input_resource(args.input)},
        )


def main(argv: list[str] | None = None) -> None:
    VictoriaGTFS().run(argv)
