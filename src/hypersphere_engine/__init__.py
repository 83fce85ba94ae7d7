"""Hypersphere Engine package."""

from .core.builder import HypersphereBuilder, build_hypersphere
from .core.errors import InvalidInputError, PointNotFoundError
from .core.points import PatternSet, PointSet
from .survey.shell_stats import compare_radii, survey_shells

__all__ = [
    "HypersphereBuilder",
    "build_hypersphere",
    "InvalidInputError",
    "PointNotFoundError",
    "PatternSet",
    "PointSet",
    "survey_shells",
    "compare_radii",
]
