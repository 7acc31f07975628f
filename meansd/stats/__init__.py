"""
Statistical computation for the sampling-distribution exercises.

The package separates generic computations from their application:

1. **Common** (meansd.stats.common):
   Generators, descriptive statistics, histogram binning and CDFs. Pure
   functions over immutable inputs, with no knowledge of any exercise.

2. **Methods** (meansd.stats.methods):
   The two-sample hypothesis tests, Mann-Whitney U and Welch's t-test,
   built from the common pieces.

3. **Schemes** (meansd.stats.schemes):
   The exercises themselves, which compose common pieces and methods into
   the configuration each widget uses.

Example:
--------
>>> # Generic computation
>>> from meansd.stats.common.descriptive import mean
>>> mean([1, 2, 3])
2.0

>>> # Method built on it
>>> from meansd.stats.methods.rank_tests import mann_whitney_u
>>> mann_whitney_u([1, 2, 3], [4, 5, 6]).u
0.0
"""
