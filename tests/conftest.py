import logging

import matplotlib

matplotlib.use("Agg")

import pytest

from stonelayout.engine.layout_engine import LayoutEngine
from stonelayout.model.parameters import PatternType, StoneParameters


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI reconfigures the package logger; undo that between tests."""
    logger = logging.getLogger("stonelayout")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def default_params() -> StoneParameters:
    return StoneParameters()


@pytest.fixture
def stack_params() -> StoneParameters:
    """Fixed-size stones, no joints, no jitter: fully predictable courses."""
    return StoneParameters(
        wall_width=1000.0,
        wall_height=1.0,
        stone_min_width=100.0,
        stone_max_width=100.0,
        joint_width=0.0,
        randomness=0.0,
        pattern_type=PatternType.STACK,
    )


@pytest.fixture
def engine() -> LayoutEngine:
    return LayoutEngine()
