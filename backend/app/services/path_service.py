from __future__ import annotations

import logging
import time
from typing import Sequence

from flightpath.config.settings import SynthesisConfig
from flightpath.synthesis.path_synthesizer import PathResult, synthesize
from flightpath.utils.time import deadline_from_timeout_ms


class PathService:
    """
    Runs one path calculation per call under the configured deadline.

    Nothing is cached between calls: every call builds its own graph.
    """

    def __init__(self, config: SynthesisConfig) -> None:
        self.config = config

    def calculate(self, segments: Sequence[Sequence[str]]) -> PathResult:
        t0 = time.perf_counter()
        deadline = deadline_from_timeout_ms(self.config.timeout_ms)

        result = synthesize(segments, deadline=deadline)

        logging.getLogger("flightpath.synthesis").info(
            "path of %s airports from %s segments in %.2f ms",
            len(result.full_path),
            len(segments),
            (time.perf_counter() - t0) * 1000.0,
        )
        return result
