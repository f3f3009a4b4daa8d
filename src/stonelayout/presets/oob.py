"""
Preset Loader (.oob)
====================
Reads stone layout presets from the line-oriented .oob text format.

Format
------
Only lines starting with the marker ``@@`` carry parameters; everything else
is ignored. After the marker come a key and its values, separated by ``;``,
``#`` or whitespace::

    @@wall_width;5000
    @@StoneMinWidth # 200
    @@joint 10 10
    @@pattern;running

Keys are matched case-insensitively and without ``_``/``-``; several
synonyms map to the same parameter. A key with no usable value, or a key not
present in the file, keeps its default. Loading never fails on content.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum
import logging
import os
import re
from typing import Dict, List, Optional, Union

from stonelayout.config import PRESETS_PATH, PRESET_EXTENSION
from stonelayout.model.parameters import StoneParameters, LayoutDirection, PatternType

logger = logging.getLogger(__name__)

MARKER = "@@"
_DELIMITERS = re.compile(r"[;#\s]+")

OobValue = Union[float, str]

# Normalized key (lower case, no '_' or '-') -> StoneParameters field
KEY_SYNONYMS: Dict[str, str] = {
    "width": "wall_width",
    "wallwidth": "wall_width",
    "height": "wall_height",
    "wallheight": "wall_height",
    "minwidth": "stone_min_width",
    "stoneminwidth": "stone_min_width",
    "maxwidth": "stone_max_width",
    "stonemaxwidth": "stone_max_width",
    "minheight": "stone_min_height",
    "stoneminheight": "stone_min_height",
    "maxheight": "stone_max_height",
    "stonemaxheight": "stone_max_height",
    "joint": "joint_width",
    "jointwidth": "joint_width",
    "jointheight": "joint_height",
    "randomness": "randomness",
    "random": "randomness",
    "variation": "randomness",
    "direction": "layout_direction",
    "layoutdirection": "layout_direction",
    "pattern": "pattern_type",
    "patterntype": "pattern_type",
}

_ENUM_FIELDS = {
    "layout_direction": LayoutDirection,
    "pattern_type": PatternType,
}


@dataclass(frozen=True)
class OobPreset:
    name: str
    parameters: StoneParameters


def normalize_key(key: str) -> str:
    return key.strip().lower().replace("_", "").replace("-", "")


def _parse_value(token: str) -> OobValue:
    try:
        return float(token)
    except ValueError:
        return token


def parse_oob(content: str) -> Dict[str, List[OobValue]]:
    """
    Extracts the raw parameter lines of an .oob file.

    Returns:
        Mapping of lower-cased key to its values in file order. Numeric
        tokens become floats, anything else is kept as text. A key that
        appears twice keeps its last occurrence.
    """
    params: Dict[str, List[OobValue]] = {}

    for line in content.splitlines():
        line = line.strip()
        if not line.startswith(MARKER):
            continue

        tokens = [t for t in _DELIMITERS.split(line[len(MARKER):]) if t]
        if not tokens:
            continue

        key = tokens[0].lower()
        params[key] = [_parse_value(t) for t in tokens[1:]]

    return params


def _first_number(values: List[OobValue]) -> Optional[float]:
    for value in values:
        # NaN/inf tokens parse as floats but are not usable magnitudes
        if isinstance(value, float) and value == value and abs(value) != float("inf"):
            return value
    return None


def _first_member(enum_cls: type[StrEnum], values: List[OobValue]) -> Optional[StrEnum]:
    for value in values:
        if not isinstance(value, str):
            continue
        try:
            return enum_cls(value.lower())
        except ValueError:
            continue
    return None


def parameters_from_oob(content: str, defaults: Optional[StoneParameters] = None) -> StoneParameters:
    """
    Builds a StoneParameters record from .oob text.

    Args:
        content: The file contents.
        defaults: Values used for missing or unusable keys.
            Defaults to StoneParameters().
    """
    defaults = defaults or StoneParameters()
    known = {f.name for f in fields(StoneParameters)}
    values: Dict[str, object] = {}

    for raw_key, raw_values in parse_oob(content).items():
        field_name = KEY_SYNONYMS.get(normalize_key(raw_key))
        if field_name is None or field_name not in known:
            logger.debug(f"Ignoring unknown preset key '{raw_key}'.")
            continue

        if field_name in _ENUM_FIELDS:
            member = _first_member(_ENUM_FIELDS[field_name], raw_values)
            if member is None:
                logger.debug(f"No usable value for '{raw_key}', keeping default.")
            else:
                values[field_name] = member
            continue

        number = _first_number(raw_values)
        if number is None:
            logger.debug(f"No numeric value for '{raw_key}', keeping default.")
            continue
        values[field_name] = number

    return defaults.replace(**values)


def load_preset(filepath: str) -> OobPreset:
    """Loads a single preset; the preset name is the file name without extension."""
    logger.info(f"Loading preset from: {filepath}")
    with open(filepath, "r", encoding="utf-8", errors="replace") as f:
        content = f.read()

    name = os.path.splitext(os.path.basename(filepath))[0]
    return OobPreset(name=name, parameters=parameters_from_oob(content))


def load_preset_files(directory: str = PRESETS_PATH) -> List[OobPreset]:
    """
    Loads every .oob preset in a directory, sorted by name.
    Files that cannot be read are skipped.
    """
    if not os.path.isdir(directory):
        logger.warning(f"Preset directory not found: {directory}")
        return []

    presets: List[OobPreset] = []
    for filename in sorted(os.listdir(directory)):
        if not filename.lower().endswith(PRESET_EXTENSION):
            continue
        path = os.path.join(directory, filename)
        try:
            presets.append(load_preset(path))
        except OSError as e:
            logger.warning(f"Could not read preset '{path}': {e}")

    logger.debug(f"Loaded {len(presets)} presets from {directory}.")
    return sorted(presets, key=lambda p: p.name)
