"""
flightpath
==========

Reconstructs a journey from an unordered list of flight segments.

Core idea:
- Load the segments into a directed graph that refuses cycles,
  then keep the longest chain a depth-first walk can find.

Public API:
- DirectedGraph
- Traits
- calculate_path
- synthesize
"""

from flightpath.config.settings import Traits
from flightpath.graph.directed_graph import DirectedGraph
from flightpath.synthesis.path_synthesizer import calculate_path, synthesize

__all__ = [
    "DirectedGraph",
    "Traits",
    "calculate_path",
    "synthesize",
]

__version__ = "0.1.0"
