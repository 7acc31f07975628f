"""
meansd.runtime
==============

Runtime for driving exercises.

This namespace contains the execution infrastructure around exercise
templates: the template base class, its result record, and runners that step
through progressive reveals or feed several templates at once.

Key Components
--------------
- `ExerciseTemplate`: Base class for all exercise definitions
- `AnalysisResult`: Records derived from an exercise at one batch
- `reveal_schedule`: Prefix lengths of a progressive reveal
- `RevealRunner`: Caller-driven, frame-by-frame rebinning of a growing prefix
- `BatchRunner`: Same batches fed to several templates

Examples
--------
>>> from meansd.runtime.experiment_template import ExerciseTemplate, AnalysisResult
>>> from meansd.runtime.runners import RevealRunner, reveal_schedule
>>> list(reveal_schedule(3, frames=3))
[1, 2, 3]
"""
