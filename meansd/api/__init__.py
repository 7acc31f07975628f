"""
meansd.api - Exercise Facade
============================

Builds the widgets' exercises from a few keyword arguments, using the
vocabulary of the widgets rather than of the components underneath.

Examples
--------
>>> from meansd.api.exercises import normal_exercise, lognormal_exercise
>>> normal = normal_exercise("normal", seed=3)
>>> normal.add_samples()
>>> len(normal.samples)
100

Unified Interface
-----------------
All exercises are built from `meansd.api.exercises`:
- `normal_exercise()`: accumulate normal samples and fit a curve
- `lognormal_exercise()`: accumulate skewed samples where the curve fails
- `parametric_comparison()`: t-test vs. Mann-Whitney U on two groups
- `galton_board()`: tally of Galton-board landing slots
"""
