"""
meansd.runtime.runners
======================

Caller-driven runners over exercise templates.

The widgets reveal new samples a few at a time, rebinning everything seen so
far at each step. Here that loop is explicit: `reveal_schedule` lists the
prefix lengths to show, and `RevealRunner` yields one `RevealFrame` per prefix.
Nothing here waits on a clock; the caller decides when to pull the next
frame.

Examples
--------
>>> list(reveal_schedule(10, frames=4))
[3, 6, 9, 10]
>>> list(reveal_schedule(250, start_from=200, frames=100))[:3]
[201, 202, 203]
>>> list(reveal_schedule(5, start_from=5))
[]

>>> from meansd.stats.schemes.exercises import NormalExercise, NormalConfig
>>> exercise = NormalExercise("normal", NormalConfig(seed=7))
>>> exercise.add_samples(50)
>>> frames = list(RevealRunner(exercise).reveal(frames=10))
>>> [f.prefix_length for f in frames][-1], frames[-1].histogram.total
(50, 50)
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

from meansd.core.model import Dataset, Histogram, Summary
from meansd.core.names import SAMPLES
from meansd.runtime.experiment_template import AnalysisResult, ExerciseTemplate
from meansd.stats.common.descriptive import describe
from meansd.stats.common.histogram import HistogramBinner

logger = logging.getLogger(__name__)

DEFAULT_FRAMES = 100


def reveal_schedule(
    total: int, start_from: int = 0, frames: int = DEFAULT_FRAMES
) -> Iterator[int]:
    """
    Yield the prefix lengths of a progressive reveal.

    Samples ``start_from .. total`` are revealed in steps of
    ``max(1, ceil((total - start_from) / frames))``; the last prefix is always
    ``total``.

    Args:
        total: Length of the full dataset
        start_from: Samples already on screen
        frames: Target number of steps

    Returns:
        Iterator of increasing prefix lengths
    """
    if frames < 1:
        raise ValueError(f"frames must be positive, got {frames}")
    if not 0 <= start_from <= total:
        raise ValueError(
            f"start_from must be in [0, {total}], got {start_from}"
        )

    per_frame = max(1, math.ceil((total - start_from) / frames))
    shown = start_from
    while shown < total:
        shown = min(shown + per_frame, total)
        yield shown


@dataclass(frozen=True)
class RevealFrame:
    """One step of a progressive reveal."""

    prefix_length: int
    histogram: Histogram
    summary: Summary


class RevealRunner:
    """
    Progressive reveal of one dataset of an exercise.

    Each frame rebins the whole prefix from scratch, so a frame depends only
    on its prefix length, never on the frames before it.
    """

    def __init__(
        self,
        template: ExerciseTemplate,
        dataset: str = SAMPLES,
        binner: Optional[HistogramBinner] = None,
    ):
        self.template = template
        self.dataset_name = dataset
        self.binner = binner if binner is not None else getattr(template, "binner")

    def _dataset(self) -> Dataset:
        dataset = self.template.dataset(self.dataset_name)
        if dataset is None:
            raise RuntimeError(
                f"Exercise {self.template.exercise_id} has no dataset "
                f"{self.dataset_name!r}. Call add_observations() first."
            )
        return dataset

    def frame(self, prefix_length: int) -> RevealFrame:
        """The frame showing the first ``prefix_length`` samples."""
        prefix = self._dataset().prefix(prefix_length)
        return RevealFrame(
            prefix_length=len(prefix),
            histogram=self.binner.bin(prefix),
            summary=describe(prefix.values),
        )

    def reveal(
        self, start_from: int = 0, frames: int = DEFAULT_FRAMES
    ) -> Iterator[RevealFrame]:
        """Yield frames from ``start_from`` up to the full dataset."""
        total = len(self._dataset())
        logger.debug(
            "revealing %s/%s: %d -> %d samples",
            self.template.exercise_id,
            self.dataset_name,
            start_from,
            total,
        )
        for length in reveal_schedule(total, start_from, frames):
            yield self.frame(length)

    def add_and_reveal(
        self, frames: int = DEFAULT_FRAMES, **kwargs: Any
    ) -> Iterator[RevealFrame]:
        """Add one batch through the template, then reveal only the new samples."""
        existing = self.template.dataset(self.dataset_name)
        start_from = len(existing) if existing is not None else 0
        self.template.add_observations(**kwargs)
        return self.reveal(start_from=start_from, frames=frames)


class BatchRunner:
    """
    Runner for several exercise templates fed the same batches.

    Useful for comparing seeds or configurations side by side.
    """

    def __init__(self, templates: List[ExerciseTemplate]):
        self.templates = templates
        self._results_history: List[List[AnalysisResult]] = []

    def add_observations_all(self, **kwargs: Any) -> None:
        """Add the same batch request to every template."""
        for template in self.templates:
            template.add_observations(**kwargs)

    def analyze_all(self) -> List[AnalysisResult]:
        """Analyze every template and return the results in order."""
        results = [template.analyze() for template in self.templates]
        self._results_history.append(results)
        return results

    def get_comparison_summary(
        self, metric: Callable[[AnalysisResult], Any] = lambda r: r.summaries
    ) -> Dict[str, Any]:
        """Compare the latest results of every template on ``metric``."""
        latest = self._results_history[-1] if self._results_history else []
        return {
            "total_templates": len(self.templates),
            "templates": [t.get_summary() for t in self.templates],
            "latest": {r.exercise_id: metric(r) for r in latest},
        }

    def reset(self) -> None:
        for template in self.templates:
            template.reset()
        self._results_history.clear()
