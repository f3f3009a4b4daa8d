"""
Input/Output Manager
Handles exporting layouts to JSON and VTK, and reading exported parameters back.
"""
from __future__ import annotations

from datetime import datetime, timezone
from importlib.metadata import version, PackageNotFoundError
import json
import logging
import os
from typing import Any, Dict

from stonelayout.config import EXPORT_SCHEMA_VERSION
from stonelayout.model.layout import Layout
from stonelayout.model.parameters import StoneParameters

logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("stonelayout")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

# StoneParameters field -> key used in exported files
EXPORT_PARAMETER_KEYS: Dict[str, str] = {
    "wall_width": "wallWidth",
    "wall_height": "wallHeight",
    "stone_min_width": "stoneMinWidth",
    "stone_max_width": "stoneMaxWidth",
    "stone_min_height": "stoneMinHeight",
    "stone_max_height": "stoneMaxHeight",
    "joint_width": "jointWidth",
    "joint_height": "jointHeight",
    "randomness": "randomness",
    "layout_direction": "layoutDirection",
    "pattern_type": "patternType",
}


class IOManager:

    @staticmethod
    def layout_to_dict(params: StoneParameters, layout: Layout) -> Dict[str, Any]:
        """
        Serializable snapshot of a layout: the parameters plus the position
        and size of every stone. Stone ids are not exported.
        """
        params_dict = params.to_dict()
        return {
            "version": EXPORT_SCHEMA_VERSION,
            "generator": APP_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "parameters": {
                EXPORT_PARAMETER_KEYS[key]: val for key, val in params_dict.items()
            },
            "layout": {
                "stones": [
                    {
                        "x": stone.x,
                        "y": stone.y,
                        "width": stone.width,
                        "height": stone.height,
                        "depth": stone.depth,
                    }
                    for stone in layout.stones
                ],
                "totalArea": layout.total_area,
                "stoneCount": layout.stone_count,
                "truncated": layout.truncated,
            },
        }

    @staticmethod
    def export_json(params: StoneParameters, layout: Layout, filepath: str) -> None:
        logger.info(f"Exporting layout to: {filepath}")
        try:
            data = IOManager.layout_to_dict(params, layout)
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            logger.info(f"Exported {layout.stone_count} stones to: {filepath}")
        except Exception as e:
            logger.exception(f"Failed to export layout: {e}")
            raise e

    @staticmethod
    def load_parameters_json(filepath: str) -> StoneParameters:
        """
        Reads the parameter block of a previously exported JSON file.
        Unknown keys are ignored; missing keys keep their defaults.
        """
        logger.info(f"Loading parameters from: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except Exception as e:
            logger.exception(f"Failed to read export file: {e}")
            raise e

        file_version = data.get("version")
        if file_version != EXPORT_SCHEMA_VERSION:
            logger.warning(
                f"Export schema version '{file_version}' differs from '{EXPORT_SCHEMA_VERSION}'."
            )

        if "parameters" not in data:
            msg = f"File '{filepath}' does not contain a parameters block."
            logger.error(msg)
            raise ValueError(msg)

        import_keys = {val: key for key, val in EXPORT_PARAMETER_KEYS.items()}
        raw = {
            import_keys.get(key, key): val for key, val in data["parameters"].items()
        }
        return StoneParameters.from_dict(raw)

    @staticmethod
    def export_vtk(layout: Layout, filepath: str) -> None:
        """
        Saves the layout as a box mesh; the format follows the extension (.vtp, .vtk).
        """
        # pyvista is only needed here
        from stonelayout.view.mesh import layout_to_polydata

        if layout.stone_count == 0:
            msg = f"Layout has no stones to export to '{filepath}'."
            logger.error(msg)
            raise ValueError(msg)

        parent = os.path.dirname(filepath)
        if parent:
            os.makedirs(parent, exist_ok=True)

        try:
            mesh = layout_to_polydata(layout)
            mesh.save(filepath)
            logger.info(f"Mesh exported to: {filepath}")
        except Exception as e:
            logger.exception("Failed to export mesh file")
            raise e
