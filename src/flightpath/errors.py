from __future__ import annotations

from typing import Optional


class FlightpathError(Exception):
    """
    Root of every error raised by flightpath.

    All of them are terminal for the current request.
    """


# ---------------------------------------------------------------------
# Graph errors
# ---------------------------------------------------------------------


class GraphError(FlightpathError):
    """
    Graph failure with a fixed message and an optional context prefix.

    str(VertexNotFound("source vertex SFO")) -> "source vertex SFO: vertex not found"
    """

    message = "graph error"

    def __init__(self, context: Optional[str] = None) -> None:
        self.context = context
        if context:
            super().__init__(f"{context}: {self.message}")
        else:
            super().__init__(self.message)


class VertexNotFound(GraphError):
    message = "vertex not found"


class VertexAlreadyExists(GraphError):
    message = "vertex already exists"


class EdgeNotFound(GraphError):
    message = "edge not found"


class EdgeAlreadyExists(GraphError):
    message = "edge already exists"


class EdgeCreatesCycle(GraphError):
    message = "edge would create a cycle"


class VertexHasEdges(GraphError):
    message = "vertex has edges"


class TargetNotReachable(GraphError):
    message = "target vertex not reachable from source"


# ---------------------------------------------------------------------
# Request errors
# ---------------------------------------------------------------------


class InputError(FlightpathError, ValueError):
    """
    Malformed or empty segment payload.
    """


class SynthesisTimeout(FlightpathError):
    """
    The deadline expired before a path could be synthesized.
    """

    def __init__(self, message: str = "calculation timed out") -> None:
        super().__init__(message)
