# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from . import cleaners, errors, rules, tasks, tools
from .app import VictoriaGTFS, main
from .classifier import HeadsignClassifier, strip_route_prefix
from .directions import ClassifiedHeadsign, Direction, DirectionRule, MergeRule
from .merger import HeadsignMergeResolver
from .options import AdapterOptions

__all__ = [
    "cleaners",
    "errors",
    "rules",
    "tasks",
    "tools",
    "AdapterOptions",
    "ClassifiedHeadsign",
    "Direction",
    "DirectionRule",
    "HeadsignClassifier",
    "HeadsignMergeResolver",
    "MergeRule",
    "VictoriaGTFS",
    "main",
    "strip_route_prefix",
]

__version__ = "1.0.0"
