"""Load a :class:`Dictionary` from a YAML lexis file.

File format::

    poles:                  # unordered pairs, both directions mate
      - ["+", "-"]
    directed_poles:         # one direction only
      - ["a", "b"]
    sections:
      - point: A
        weight: 9          # key name configurable, see ``weight_key``
        connectors: [[X, "+"], [Y, "-"]]
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from aggregen.domain.types import Connector, Point, Section
from aggregen.library.dictionary import Dictionary


class LexisError(ValueError):
    """Raised when a lexis file cannot be turned into a dictionary."""


def load_lexis(
    path: Path, *, default_weight: float = 0.0, weight_key: str = "weight"
) -> Dictionary:
    """Parse the YAML file at *path* and build a dictionary."""
    try:
        data = YAML(typ="safe").load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeError, YAMLError) as exc:
        msg = f"Cannot read lexis {path}: {exc}"
        raise LexisError(msg) from exc
    return build_dictionary(data or {}, default_weight=default_weight, weight_key=weight_key)


def build_dictionary(
    data: dict[str, Any], *, default_weight: float = 0.0, weight_key: str = "weight"
) -> Dictionary:
    """Build a dictionary from an already-parsed lexis mapping.

    Section weights are read from *weight_key*; sections without it fall
    back to *default_weight* when sampled.
    """
    if not isinstance(data, dict):
        msg = "Lexis must be a mapping with 'poles' and 'sections'"
        raise LexisError(msg)

    dictionary = Dictionary(default_weight=default_weight)
    for p0, p1 in _pairs(data.get("poles", []), "poles"):
        dictionary.add_pole_pair(p0, p1, unordered=True)
    for p0, p1 in _pairs(data.get("directed_poles", []), "directed_poles"):
        dictionary.add_pole_pair(p0, p1)

    raw_sections = data.get("sections", [])
    if not isinstance(raw_sections, list):
        msg = "'sections' must be a list"
        raise LexisError(msg)
    dictionary.add_to_lexis(_section(entry, i, weight_key) for i, entry in enumerate(raw_sections))
    return dictionary


def _pairs(raw: Any, key: str) -> list[tuple[str, str]]:
    if not isinstance(raw, list):
        msg = f"'{key}' must be a list of pairs"
        raise LexisError(msg)
    pairs: list[tuple[str, str]] = []
    for item in raw:
        if not isinstance(item, list) or len(item) != 2:
            msg = f"Invalid entry in '{key}': {item!r}"
            raise LexisError(msg)
        pairs.append((str(item[0]), str(item[1])))
    return pairs


def _section(entry: Any, index: int, weight_key: str) -> Section:
    if not isinstance(entry, dict) or "point" not in entry:
        msg = f"Section #{index} needs a 'point'"
        raise LexisError(msg)

    raw_cons = entry.get("connectors", [])
    if not isinstance(raw_cons, list) or not raw_cons:
        msg = f"Section #{index} ({entry['point']}) needs a non-empty 'connectors' list"
        raise LexisError(msg)
    connectors: list[Connector] = []
    for con in raw_cons:
        if not isinstance(con, list) or len(con) != 2:
            msg = f"Section #{index}: connector {con!r} must be [label, pole]"
            raise LexisError(msg)
        connectors.append(Connector(str(con[0]), str(con[1])))

    return Section(
        point=Point(str(entry["point"])),
        connectors=tuple(connectors),
        weight=_weight(entry.get(weight_key), index),
    )


def _weight(raw: Any, index: int) -> float | None:
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        msg = f"Section #{index}: weight must be a number, got {raw!r}"
        raise LexisError(msg)
    weight = float(raw)
    if math.isnan(weight) or weight < 0:
        msg = f"Section #{index}: weight must be non-negative, got {raw!r}"
        raise LexisError(msg)
    return weight
