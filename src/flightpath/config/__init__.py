"""
Configuration layer for flightpath.

Configuration records are:
- Explicit (passed, not global)
- Typed (validated at construction time)
"""

from flightpath.config.settings import Traits, SynthesisConfig

__all__ = [
    "Traits",
    "SynthesisConfig",
]
