def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between start and end; a reversed range is not corrected."""
    return start + (end - start) * t
