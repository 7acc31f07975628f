"""
meansd.core
===========

Typed names, immutable records, errors and component base classes shared by
every other layer.
"""
