"""
meansd.core.components
======================

Base classes for components that derive records from datasets.

A component reads the datasets of an exercise by name and returns a derived
record (a histogram, a summary, a test result). Components never mutate their
inputs and keep no state between calls, so calling one twice on the same
datasets returns equal records.

Component Types:
- `Statistic`: compute a record from one or more named datasets
- `SingleDatasetStatistic`: a statistic over exactly one named dataset
- `TwoSampleStatistic`: a statistic comparing datasets ``A`` and ``B``

Examples
--------
>>> from meansd.core.model import Dataset
>>>
>>> class CountStat(SingleDatasetStatistic):
...     def compute_one(self, dataset):
...         return len(dataset)
...
>>> CountStat().compute({"samples": Dataset.of([1, 2, 3])})
3
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Union

from meansd.core.model import Dataset
from meansd.core.names import DatasetName, GROUP_A, GROUP_B, SAMPLES

# Type aliases
DatasetNameLike = Union[DatasetName, str]
Datasets = Mapping[str, Dataset]


class ComponentBase(ABC):
    """
    Base class for all components.

    Subclasses implement `compute()`, which maps named datasets to a record.
    """

    @abstractmethod
    def compute(self, datasets: Datasets) -> Any:
        """Derive this component's record from the given datasets."""
        pass


@dataclass(kw_only=True)
class Statistic(ComponentBase):
    """
    Base class for derived statistics.

    ``tag`` identifies the kind of record the statistic produces.
    """

    tag: str = "stat:generic"

    def compute(self, datasets: Datasets) -> Any:
        """Override this method to implement the statistic."""
        raise NotImplementedError("Subclasses must implement compute()")


@dataclass(kw_only=True)
class SingleDatasetStatistic(Statistic):
    """A statistic over the single dataset called ``source``."""

    source: DatasetNameLike = SAMPLES

    def compute(self, datasets: Datasets) -> Any:
        return self.compute_one(_lookup(datasets, self.source))

    @abstractmethod
    def compute_one(self, dataset: Dataset) -> Any:
        pass


@dataclass(kw_only=True)
class TwoSampleStatistic(Statistic):
    """A statistic comparing the datasets called ``source_a`` and ``source_b``."""

    source_a: DatasetNameLike = GROUP_A
    source_b: DatasetNameLike = GROUP_B

    def compute(self, datasets: Datasets) -> Any:
        return self.compare(
            _lookup(datasets, self.source_a), _lookup(datasets, self.source_b)
        )

    @abstractmethod
    def compare(self, a: Dataset, b: Dataset) -> Any:
        pass


def _lookup(datasets: Datasets, name: DatasetNameLike) -> Dataset:
    try:
        return datasets[str(name)]
    except KeyError:
        raise KeyError(
            f"Dataset {name!r} not found; available: {sorted(datasets)}"
        ) from None
