"""hypersphere_engine.survey"""

from .shell_stats import compare_radii, layer_profile, survey_shells

__all__ = [
    "survey_shells",
    "compare_radii",
    "layer_profile",
]
