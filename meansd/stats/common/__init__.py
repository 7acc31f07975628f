"""
meansd.stats.common
===================

Generic building blocks of the statistical core.

This module holds the pure, scheme-independent computations every exercise is
built from: the seeded generator (`prng`), normal and lognormal sampling
(`sampling`), mean and SDs (`descriptive`), fixed-range binning (`histogram`)
and the normal / Student's t CDFs (`distributions`).
"""
