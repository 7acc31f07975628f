"""
meansd.core.errors
==================

Exception types raised by the package.

Only invalid *parameters* are errors. Empty datasets, single-element sample
SDs and zero-variance groups have defined return values and never raise.

Examples
--------
>>> from meansd.core.errors import InvalidParameterError
>>> issubclass(InvalidParameterError, ValueError)
True
"""

from __future__ import annotations


class InvalidParameterError(ValueError):
    """A distribution, sampler or binning parameter is out of its domain."""
