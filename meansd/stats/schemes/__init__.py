"""
Exercise-specific applications of the statistical core.

This module combines the generic computations of `meansd.stats.common` and
the tests of `meansd.stats.methods` into the configuration each widget uses:

- `exercises.NormalExercise`: normal sampling with a fitted curve
- `exercises.LognormalExercise`: skewed sampling where the fitted curve fails
- `exercises.ParametricComparison`: t-test vs. Mann-Whitney U on two groups
- `exercises.GaltonBoardTally`: slot counts of a Galton board
"""
