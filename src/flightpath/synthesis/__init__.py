"""
Path synthesis: segments in, longest chain out.
"""

from flightpath.synthesis.path_synthesizer import (
    PathResult,
    build_graph,
    calculate_path,
    normalize_segments,
    synthesize,
)

__all__ = [
    "PathResult",
    "build_graph",
    "calculate_path",
    "normalize_segments",
    "synthesize",
]
