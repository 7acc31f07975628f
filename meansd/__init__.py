"""
meansd: the statistical core behind the sampling-distribution widgets.

The widgets teach why the mean and standard deviation describe some data well
and other data badly: a Galton board, histograms that fill up sample by
sample, normal and lognormal draws, and a comparison where a t-test and a
Mann-Whitney U test disagree. Everything the widgets *compute* lives here;
everything they *draw* does not.

The package is layered the same way throughout:

- `meansd.stats.common`: generators, descriptive statistics, binning and
  distribution functions. Pure functions over immutable inputs.
- `meansd.stats.methods`: the two hypothesis tests.
- `meansd.stats.schemes`: the exercises, composed from components.
- `meansd.runtime`: exercise templates and caller-driven reveal runners.
- `meansd.reporting`: p-value formatting and polars report frames.
- `meansd.api`: a small facade for building the exercises.

Determinism is the point of the generator: the same seed always regenerates
the same demo.

Example
-------
>>> import meansd
>>> assert hasattr(meansd, "stats")
>>> assert hasattr(meansd, "core")
"""

from meansd.__version__ import __version__
from meansd import core, stats

__all__ = ["__version__", "core", "stats"]
