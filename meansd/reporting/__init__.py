"""
meansd.reporting
================

P-value labels and polars report frames built from exercise results.
"""
