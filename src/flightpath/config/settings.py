from __future__ import annotations

from dataclasses import dataclass, fields

# ---------------------------------------------------------------------
# Graph traits
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class Traits:
    """
    Graph-level configuration flags, fixed when the graph is created.

    - directed: edges are ordered (source, target) pairs
    - acyclic: the graph is declared acyclic; cycles are not checked
    - prevent_cycles: every edge insertion is cycle-checked
      (implies acyclic)
    """

    directed: bool = False
    acyclic: bool = False
    prevent_cycles: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise TypeError(
                    f"trait '{f.name}' must be a bool, got {type(value).__name__}"
                )

        if self.prevent_cycles and not self.acyclic:
            object.__setattr__(self, "acyclic", True)

    @staticmethod
    def directed_only() -> "Traits":
        return Traits(directed=True)

    @staticmethod
    def directed_acyclic(*, prevent_cycles: bool = True) -> "Traits":
        return Traits(
            directed=True,
            acyclic=True,
            prevent_cycles=prevent_cycles,
        )


# ---------------------------------------------------------------------
# Path synthesis
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class SynthesisConfig:
    """
    Controls how segments are turned into a path.

    timeout_ms bounds the whole calculation (0 = no deadline).
    """

    timeout_ms: float = 10_000.0
