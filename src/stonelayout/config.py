"""
Configuration & Path Management
===============================
Central registry for file paths and global constants of the layout engine.

Why is this file needed?
------------------------
1. Abstraction: the packing constants (minimum stone size, safety cutoff,
   running bond offset range) live in one place instead of being repeated
   as magic numbers in the engine.
2. Deployment: it resolves the assets directory both in development and when
   the tool is frozen with PyInstaller (sys._MEIPASS).

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    PRESETS_PATH (str): Absolute path to the bundled .oob presets.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/stonelayout/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
PRESETS_PATH: str = os.path.join(ASSETS_PATH, "presets")
PRESET_EXTENSION: str = ".oob"

# Sequence generator
DEFAULT_SEED: int = 12345

# Packing
MIN_STONE_SIZE: float = 20.0  # stones at or below this size are discarded
MAX_STONES: int = 10_000  # safety cutoff for a single layout
MAX_ROW_STEPS: int = 100_000  # cursor steps allowed in one course
STONE_DEPTH: float = 100.0  # display thickness, not part of the packing
# Five alternating stone materials for viewers
STONE_PALETTE: tuple[str, ...] = ("#8B7355", "#9C8A6B", "#7A6B47", "#A0916F", "#6B5B3F")
RUNNING_OFFSET_MIN: float = 50.0
RUNNING_OFFSET_MAX: float = 200.0

# Export
EXPORT_SCHEMA_VERSION: str = "1.0"

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
