# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from pathlib import Path
from typing import Any, Mapping

import yaml

from .directions import Direction, DirectionRule, MergeRule
from .errors import InvalidRuleFile

DATA_DIR = Path(__file__).with_name("data")
DEFAULT_DIRECTION_RULES = DATA_DIR / "direction_rules.yaml"
DEFAULT_MERGE_RULES = DATA_DIR / "merge_rules.yaml"

DirectionRules = dict[str, list[DirectionRule]]
MergeRules = dict[str, list[MergeRule]]


def load_direction_rules(path: Path | None = None) -> DirectionRules:
    """Loads the per-route headsign → direction rules from a YAML file.
    Defaults to the rules shipped with the package.
    """
    path = path or DEFAULT_DIRECTION_RULES
    return {
        route: [_parse_direction_rule(path, route, i) for i in _rule_list(path, route, rules)]
        for route, rules in _load_mapping(path).items()
    }


def load_merge_rules(path: Path | None = None) -> MergeRules:
    """Loads the per-route headsign merge rules from a YAML file.
    Defaults to the rules shipped with the package.
    """
    path = path or DEFAULT_MERGE_RULES
    return {
        route: [_parse_merge_rule(path, route, i) for i in _rule_list(path, route, rules)]
        for route, rules in _load_mapping(path).items()
    }


def _load_mapping(path: Path) -> Mapping[str, Any]:
    with path.open(mode="r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidRuleFile(path, f"invalid YAML: {e}") from e

    if data is None:
        return {}
    elif not isinstance(data, dict):
        raise InvalidRuleFile(path, "expected a mapping of route short names")
    return {str(k): v for k, v in data.items()}


def _rule_list(path: Path, route: str, rules: Any) -> list[Mapping[str, Any]]:
    if not isinstance(rules, list) or not all(isinstance(i, dict) for i in rules):
        raise InvalidRuleFile(path, f"route {route}: expected a list of rules")
    return rules


def _headsigns(path: Path, route: str, raw: Mapping[str, Any]) -> list[str]:
    headsigns = raw.get("headsigns")
    if not isinstance(headsigns, list) or not headsigns:
        raise InvalidRuleFile(path, f"route {route}: rule without headsigns")
    return [str(i) for i in headsigns]


def _parse_direction_rule(path: Path, route: str, raw: Mapping[str, Any]) -> DirectionRule:
    direction_id = raw.get("direction_id")
    if direction_id is not None and direction_id not in (0, 1):
        raise InvalidRuleFile(path, f"route {route}: invalid direction_id: {direction_id!r}")

    try:
        direction = Direction.by_name(str(raw.get("direction", "")))
    except ValueError as e:
        raise InvalidRuleFile(path, f"route {route}: {e}") from e

    return DirectionRule(
        direction_id=direction_id,
        direction=direction,
        headsigns=tuple(_headsigns(path, route, raw)),
    )


def _parse_merge_rule(path: Path, route: str, raw: Mapping[str, Any]) -> MergeRule:
    headsigns = frozenset(_headsigns(path, route, raw))
    if len(headsigns) < 2:
        raise InvalidRuleFile(path, f"route {route}: merge rule needs at least 2 headsigns")

    canonical = raw.get("canonical")
    if canonical is None:
        raise InvalidRuleFile(path, f"route {route}: merge rule without canonical headsign")
    canonical = str(canonical)
    if canonical not in headsigns:
        raise InvalidRuleFile(
            path,
            f"route {route}: canonical headsign {canonical!r} is not one of the merged headsigns",
        )

    return MergeRule(headsigns, canonical)
