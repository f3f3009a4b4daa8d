"""
Layout Parameters
=================
Defines the input record consumed by the layout engine.

Why is this file needed?
------------------------
1. Single input: every value the packing procedure reads (wall size, stone
   size ranges, joints, randomness, direction and pattern) lives in one
   immutable record.
2. Persistence: this is the object that presets populate and that the
   export path serializes next to the generated layout.

Classes:
    LayoutDirection: Course orientation.
    PatternType: Coursing pattern kind.
    StoneParameters: The parameter record.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, asdict
from enum import StrEnum
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


class LayoutDirection(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class PatternType(StrEnum):
    """Coursing pattern kinds."""
    RUNNING = "running"
    STACK = "stack"
    RANDOM = "random"


@dataclass(frozen=True)
class StoneParameters:
    """
    All numeric fields are magnitudes in one linear unit (millimetres in the
    bundled presets). Ranges are not validated here; a reversed min/max pair
    simply interpolates backwards.
    """
    wall_width: float = 5000.0
    wall_height: float = 3000.0
    stone_min_width: float = 200.0
    stone_max_width: float = 600.0
    stone_min_height: float = 100.0
    stone_max_height: float = 300.0
    joint_width: float = 10.0
    joint_height: float = 10.0
    randomness: float = 0.3
    layout_direction: LayoutDirection = LayoutDirection.HORIZONTAL
    pattern_type: PatternType = PatternType.RUNNING

    def replace(self, **changes: Any) -> StoneParameters:
        """Returns a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def transposed(self) -> StoneParameters:
        """
        Swaps every horizontal quantity with its vertical counterpart.
        Used to lay out vertical courses with the horizontal row packer.
        """
        return dataclasses.replace(
            self,
            wall_width=self.wall_height,
            wall_height=self.wall_width,
            stone_min_width=self.stone_min_height,
            stone_max_width=self.stone_max_height,
            stone_min_height=self.stone_min_width,
            stone_max_height=self.stone_max_width,
            joint_width=self.joint_height,
            joint_height=self.joint_width,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["layout_direction"] = str(self.layout_direction)
        data["pattern_type"] = str(self.pattern_type)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StoneParameters:
        """
        Builds parameters from a plain dict. Unknown keys are ignored and
        missing keys keep their defaults.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        values: Dict[str, Any] = {}
        for key, val in data.items():
            if key not in known:
                logger.debug(f"Ignoring unknown parameter '{key}'.")
                continue
            values[key] = val

        if "layout_direction" in values:
            values["layout_direction"] = LayoutDirection(values["layout_direction"])
        if "pattern_type" in values:
            values["pattern_type"] = PatternType(values["pattern_type"])
        for key, val in values.items():
            if key not in ("layout_direction", "pattern_type"):
                values[key] = float(val)

        return cls(**values)
