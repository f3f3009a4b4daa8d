"""Seeded stone coursing layouts for rectangular walls."""
from stonelayout.engine.layout_engine import LayoutEngine
from stonelayout.engine.random import SeededRandom
from stonelayout.model.layout import Layout, Stone
from stonelayout.model.parameters import LayoutDirection, PatternType, StoneParameters

__all__ = [
    "Layout",
    "LayoutDirection",
    "LayoutEngine",
    "PatternType",
    "SeededRandom",
    "Stone",
    "StoneParameters",
]
