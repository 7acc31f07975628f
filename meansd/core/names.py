"""
meansd.core.names
=================

Typed names shared across the package.

- `Group`: an Enum for the two sample groups of a comparison.
- `ExerciseId`, `DatasetName`: NewType wrappers for clarity.
- Common `Literal` tags for components and test results.

Examples
--------
>>> from meansd.core.names import Group, ExerciseId
>>> Group.A.value
'A'
>>> eid = ExerciseId("normal#1"); isinstance(eid, str)
True
"""

from __future__ import annotations
from enum import Enum
from typing import Literal, NewType


class Group(str, Enum):
    """Group labels for two-sample tests."""

    A = "A"
    B = "B"


# Thin wrappers over str for logical identifiers.
ExerciseId = NewType("ExerciseId", str)
DatasetName = NewType("DatasetName", str)

# Well-known dataset names.
SAMPLES = DatasetName("samples")
GROUP_A = DatasetName("A")
GROUP_B = DatasetName("B")
SLOTS = DatasetName("slots")

# Component tags.
HistogramTag = Literal["stat:histogram"]
SummaryTag = Literal["stat:summary"]
MannWhitneyTag = Literal["test:mann_whitney_u"]
WelchTag = Literal["test:welch_t"]

TestName = Literal["mann_whitney_u", "welch_t"]
