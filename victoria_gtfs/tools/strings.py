# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Generic helpers for cleaning up names of stops, routes and headsigns.

Every helper is idempotent - applying it to its own output changes nothing.
"""

import re
from typing import Container

UPPER_CASE_WORD = re.compile(r"\b[A-Z][A-Z']*[A-Z]\b")
STARTS_WITH_TO = re.compile(r"^(?:.*\s)?to\s+", re.IGNORECASE)
ENDS_WITH_VIA = re.compile(r"\s+via\b.*$", re.IGNORECASE)
AROUND_SLASHES = re.compile(r"\s*/\s*")
ORDINAL_SUFFIX = re.compile(r"\b(\d+)(st|nd|rd|th)\b", re.IGNORECASE)
BOUNDS = re.compile(r"\b(?:(?:north|south|east|west)bound|[nsew]b)\b", re.IGNORECASE)
AT = re.compile(r"\bat\b", re.IGNORECASE)
AND = re.compile(r"\band\b", re.IGNORECASE)
EDGE_SEPARATORS = re.compile(r"^[\s/&]+|[\s/&]+$")
WORD_FINAL_PERIOD = re.compile(r"(\w)\.(?=\s|$)")
MULTIPLE_SPACES = re.compile(r"\s+")
AFTER_OPENING_BRACKET = re.compile(r"([(\[])\s+")
BEFORE_CLOSING_BRACKET = re.compile(r"\s+([)\]])")

STREET_TYPES: dict[str, str] = {
    "Avenue": "Ave",
    "Boulevard": "Blvd",
    "Center": "Ctr",
    "Centre": "Ctr",
    "Court": "Ct",
    "Crescent": "Cres",
    "Drive": "Dr",
    "Heights": "Hts",
    "Highway": "Hwy",
    "Lake": "Lk",
    "Lane": "Ln",
    "Meadows": "Mdws",
    "Mountain": "Mtn",
    "Park": "Pk",
    "Parkway": "Pkwy",
    "Place": "Pl",
    "Road": "Rd",
    "Square": "Sq",
    "Street": "St",
    "Terrace": "Terr",
    "Valley": "Vly",
    "Village": "Vlg",
}
STREET_TYPE = re.compile(r"\b(" + "|".join(STREET_TYPES) + r")\b", re.IGNORECASE)
STREET_TYPES_LOWER = {k.lower(): v for k, v in STREET_TYPES.items()}

ORDINALS: dict[str, str] = {
    "first": "1st",
    "second": "2nd",
    "third": "3rd",
    "fourth": "4th",
    "fifth": "5th",
    "sixth": "6th",
    "seventh": "7th",
    "eighth": "8th",
    "ninth": "9th",
    "tenth": "10th",
}
ORDINAL_WORD = re.compile(r"\b(" + "|".join(ORDINALS) + r")\b", re.IGNORECASE)


def title_case_upper_words(s: str, ignored: Container[str] = ()) -> str:
    """Converts words written in ALL CAPS to Title Case. Words with a single letter,
    mixed-case words and words from ``ignored`` are left as-is.

    >>> title_case_upper_words("HAPPY VALLEY VIA COLWOOD")
    'Happy Valley Via Colwood'
    >>> title_case_upper_words("Interurban - VI Tech Park", ignored={"VI"})
    'Interurban - VI Tech Park'
    >>> title_case_upper_words("N UVic - FISHERMAN'S Wharf")
    "N UVic - Fisherman's Wharf"
    """
    return UPPER_CASE_WORD.sub(
        lambda m: m[0] if m[0] in ignored else m[0].capitalize(),
        s,
    )


def keep_to(s: str) -> str:
    """Keeps only the text after the last "to" word.

    >>> keep_to("Royal Oak Exch To 75 Saanichton")
    '75 Saanichton'
    >>> keep_to("To Gorge & Douglas")
    'Gorge & Douglas'
    >>> keep_to("Toronto")
    'Toronto'
    """
    return STARTS_WITH_TO.sub("", s)


def remove_via(s: str) -> str:
    """Removes a trailing "via ..." part.

    >>> remove_via("Royal Oak Exch Via Royal Oak Mall")
    'Royal Oak Exch'
    >>> remove_via("Viaduct Loop")
    'Viaduct Loop'
    """
    return ENDS_WITH_VIA.sub("", s)


def keep_to_and_remove_via(s: str) -> str:
    """
    >>> keep_to_and_remove_via("Dean Park Via Airport To Saanichton")
    'Saanichton'
    >>> keep_to_and_remove_via("To Brentwood Via Stautw")
    'Brentwood'
    """
    return remove_via(keep_to(s))


def clean_slashes(s: str) -> str:
    """Removes whitespace around slashes.

    >>> clean_slashes("Cook St Vlg / Quimper")
    'Cook St Vlg/Quimper'
    """
    return AROUND_SLASHES.sub("/", s)


def clean_street_types(s: str) -> str:
    """Abbreviates street types and other common place name suffixes.

    >>> clean_street_types("Thetis Heights Via Florence Lake")
    'Thetis Hts Via Florence Lk'
    >>> clean_street_types("McDonald Park")
    'McDonald Pk'
    >>> clean_street_types("Spectrum School")
    'Spectrum School'
    """
    return STREET_TYPE.sub(lambda m: STREET_TYPES_LOWER[m[1].lower()], s)


def clean_numbers(s: str) -> str:
    """Replaces ordinal words with numerals and lower-cases ordinal suffixes.

    >>> clean_numbers("First Ave & 4TH St")
    '1st Ave & 4th St'
    """
    s = ORDINAL_WORD.sub(lambda m: ORDINALS[m[1].lower()], s)
    return ORDINAL_SUFFIX.sub(lambda m: m[1] + m[2].lower(), s)


def clean_bounds(s: str) -> str:
    """Removes travel direction markers, like "Eastbound" or "NB".

    >>> clean_bounds("Douglas St Northbound at Hillside")
    'Douglas St  at Hillside'
    >>> clean_bounds("Island Hwy EB")
    'Island Hwy '
    """
    return BOUNDS.sub("", s)


def clean_at(s: str) -> str:
    """Replaces the "at" word with a slash.

    >>> clean_at("Douglas St at Hillside Ave")
    'Douglas St / Hillside Ave'
    """
    return AT.sub("/", s)


def clean_and(s: str) -> str:
    """Replaces the "and" word with an ampersand.

    >>> clean_and("Richmond and Oak Bay Ave")
    'Richmond & Oak Bay Ave'
    """
    return AND.sub("&", s)


def strip_separators(s: str) -> str:
    """Removes slashes and ampersands left at the start or the end of a name,
    e.g. after removing travel direction markers.

    >>> strip_separators("Island Hwy / ")
    'Island Hwy'
    >>> strip_separators("/ Douglas St & ")
    'Douglas St'
    >>> strip_separators("Douglas St / Fort St")
    'Douglas St / Fort St'
    """
    return EDGE_SEPARATORS.sub("", s)


def clean_label(s: str) -> str:
    """Tidies whitespace and brackets, and drops periods ending a word.

    >>> clean_label("  10 R. Jubilee ")
    '10 R Jubilee'
    >>> clean_label("Uptown ( Bay 3 )")
    'Uptown (Bay 3)'
    """
    s = WORD_FINAL_PERIOD.sub(r"\1", s)
    s = MULTIPLE_SPACES.sub(" ", s)
    s = AFTER_OPENING_BRACKET.sub(r"\1", s)
    s = BEFORE_CLOSING_BRACKET.sub(r"\1", s)
    return s.strip()
