"""
Two-sample hypothesis tests.

- `rank_tests`: Mann-Whitney U with mid-ranks for ties and a normal
  approximation with continuity correction
- `t_tests`: Welch's unequal-variance t-test with Welch–Satterthwaite
  degrees of freedom

Both tests return immutable `TestResult` records and define their result for
empty groups instead of raising.
"""
