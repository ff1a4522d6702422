# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Name cleaning pipelines specific to Victoria Regional Transit System data."""

import re

from .tools import strings

IGNORED_UPPER_CASE_WORDS = frozenset({"BC", "HCP", "HMC", "SEAPARC", "VI"})

EXCHANGE = re.compile(r"\bexchange\b", re.IGNORECASE)
HEIGHTS = re.compile(r"\bhg(?:h)?ts\b", re.IGNORECASE)
UVIC = re.compile(r"\buvic\b", re.IGNORECASE)
ENDS_WITH_DASH = re.compile(r"\s+-\s.*$")
ENDS_WITH_EXPRESS = re.compile(r"\s+express\b.*$", re.IGNORECASE)
ENDS_WITH_NON_STOP_OR_ONLY = re.compile(r"(?:[.\s]+(?:non-stop|only))+[.\s]*$", re.IGNORECASE)
STATUS = re.compile(r"\(\s*-\s*(?:dcom|impl)\s*-\s*\)", re.IGNORECASE)


def clean_trip_headsign(headsign: str) -> str:
    """Cleans a trip headsign, after the route short name prefix has been removed.

    >>> clean_trip_headsign("Downtown Only")
    'Downtown'
    >>> clean_trip_headsign("James Bay - Linden to 10 R. Jubilee")
    'James Bay'
    >>> clean_trip_headsign("To Richmond & Oak Bay Ave Only")
    'Richmond & Oak Bay Ave'
    >>> clean_trip_headsign("Royal Oak Exchange")
    'Royal Oak Exch'
    >>> clean_trip_headsign("HAPPY VALLEY VIA COLWOOD")
    'Happy Vly'
    """
    headsign = strings.title_case_upper_words(headsign, IGNORED_UPPER_CASE_WORDS)
    headsign = EXCHANGE.sub("Exch", headsign)
    headsign = HEIGHTS.sub("Hts", headsign)
    headsign = ENDS_WITH_DASH.sub("", headsign)
    headsign = strings.keep_to_and_remove_via(headsign)
    headsign = ENDS_WITH_EXPRESS.sub("", headsign)
    headsign = ENDS_WITH_NON_STOP_OR_ONLY.sub("", headsign)
    headsign = strings.clean_slashes(headsign)
    headsign = strings.clean_street_types(headsign)
    headsign = strings.clean_numbers(headsign)
    return strings.clean_label(headsign)


def clean_stop_name(name: str) -> str:
    """Cleans a stop name.

    >>> clean_stop_name("(-DCOM-)DOUGLAS ST AT HILLSIDE AVE")
    'Douglas St / Hillside Ave'
    >>> clean_stop_name("UVIC EXCHANGE BAY C")
    'UVic Exch Bay C'
    >>> clean_stop_name("Island Highway Eastbound and Helmcken Road")
    'Island Hwy & Helmcken Rd'
    >>> clean_stop_name("NB (-DCOM-) Douglas St at Fort St WB")
    'Douglas St / Fort St'
    """
    name = STATUS.sub("", name)
    name = strings.title_case_upper_words(name, IGNORED_UPPER_CASE_WORDS)
    name = strings.clean_bounds(name)
    name = strings.clean_at(name)
    name = strings.clean_and(name)
    name = EXCHANGE.sub("Exch", name)
    name = UVIC.sub("UVic", name)
    name = strings.clean_street_types(name)
    name = strings.clean_numbers(name)
    name = strings.strip_separators(name)
    return strings.clean_label(name)


def clean_route_long_name(name: str) -> str:
    """
    >>> clean_route_long_name("Royal Oak  Centre / Fourth Street")
    'Royal Oak Ctr / 4th St'
    """
    name = strings.clean_numbers(name)
    name = strings.clean_street_types(name)
    return strings.clean_label(name)
