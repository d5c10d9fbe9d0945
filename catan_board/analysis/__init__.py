"""Settlement-quality helpers."""

from .scoring import PIP_VALUES, cell_pips, pip_value, rank_intersections

__all__ = ["PIP_VALUES", "cell_pips", "pip_value", "rank_intersections"]
