"""
meansd.runtime.experiment_template
==================================

Base classes for exercise templates.

An exercise template owns the datasets of one widget and the components that
derive records from them. Adding observations never mutates a dataset: each
batch replaces the exercise's datasets with new, longer ones. Analysis runs
every component over the current datasets and collects the records.

Examples
--------
>>> from meansd.core.model import Dataset
>>> from meansd.runtime.experiment_template import ExerciseTemplate
>>> from meansd.stats.schemes.exercises import SummaryStatistic
>>>
>>> class FixedTemplate(ExerciseTemplate):
...     def configure_components(self):
...         return {"summary": SummaryStatistic()}
...     def _draw_batch(self, values=()):
...         current = self.datasets.get("samples", Dataset())
...         return {"samples": current.extend(values)}
>>>
>>> template = FixedTemplate("fixed")
>>> template.add_observations(values=[1.0, 2.0, 3.0])
>>> template.analyze().summaries["summary"].mean
2.0
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from meansd.core.components import ComponentBase
from meansd.core.model import Dataset, Histogram, Summary, TestResult

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Records derived from an exercise's datasets at one batch."""

    exercise_id: str
    batch_number: int
    datasets: Dict[str, Dataset]

    histograms: Dict[str, Histogram] = field(default_factory=dict)
    summaries: Dict[str, Summary] = field(default_factory=dict)
    tests: Dict[str, TestResult] = field(default_factory=dict)

    # Records of any other kind, keyed by component name
    additional_metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_sample_size(self) -> int:
        return sum(len(d) for d in self.datasets.values())


class ExerciseTemplate(ABC):
    """
    Base class for exercise templates.

    Encapsulates all the logic for one widget:
    - Configuration and validation
    - Drawing or ingesting sample batches
    - Component configuration (histograms, summaries, tests)
    - Analysis over the current datasets

    Subclasses implement `configure_components` and `_draw_batch`.
    """

    def __init__(self, exercise_id: str):
        self.exercise_id = exercise_id
        self._datasets: Dict[str, Dataset] = {}
        self._current_batch = 0
        self.components: Dict[str, ComponentBase] = self.configure_components()

    @abstractmethod
    def configure_components(self) -> Dict[str, ComponentBase]:
        """
        Configure the components run by `analyze`.

        Returns
        -------
        Dict[str, ComponentBase]
            Components keyed by the name their record is reported under.
        """
        pass

    @abstractmethod
    def _draw_batch(self, **kwargs: Any) -> Dict[str, Dataset]:
        """Return the datasets that result from adding one batch."""
        pass

    @property
    def datasets(self) -> Mapping[str, Dataset]:
        """Read-only view of the current datasets."""
        return MappingProxyType(self._datasets)

    @property
    def batch_number(self) -> int:
        return self._current_batch

    def dataset(self, name: str) -> Optional[Dataset]:
        return self._datasets.get(name)

    def add_observations(self, **kwargs: Any) -> None:
        """Add one batch of observations and replace the current datasets."""
        datasets = self._draw_batch(**kwargs)
        self._datasets = dict(datasets)
        self._current_batch += 1
        logger.debug(
            "exercise %s: batch %d -> %s",
            self.exercise_id,
            self._current_batch,
            {name: len(d) for name, d in self._datasets.items()},
        )

    def analyze(self) -> AnalysisResult:
        """Run every component over the current datasets."""
        if self._current_batch == 0:
            raise ValueError(
                "No observations registered yet. Call add_observations() first."
            )

        result = AnalysisResult(
            exercise_id=self.exercise_id,
            batch_number=self._current_batch,
            datasets=dict(self._datasets),
        )
        for name, component in self.components.items():
            record = component.compute(self._datasets)
            if isinstance(record, Histogram):
                result.histograms[name] = record
            elif isinstance(record, Summary):
                result.summaries[name] = record
            elif isinstance(record, TestResult):
                result.tests[name] = record
            else:
                result.additional_metrics[name] = record

        logger.debug(
            "exercise %s: analyzed batch %d with %d components",
            self.exercise_id,
            self._current_batch,
            len(self.components),
        )
        return result

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the exercise state."""
        return {
            "exercise_id": str(self.exercise_id),
            "current_batch": self._current_batch,
            "dataset_sizes": {name: len(d) for name, d in self._datasets.items()},
            "components": list(self.components.keys()),
        }

    def reset(self) -> None:
        """Drop all datasets but keep the configuration."""
        self._datasets = {}
        self._current_batch = 0
