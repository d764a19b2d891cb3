"""
Sass engine: builds a Ruby Sass script from SCSS source and evaluates it.

Exports: RubySassEngine, ProcessingError, build_update_script, Evaluator, RubyEvaluator.
"""

from .engine import ProcessingError, RubySassEngine
from .evaluator import EvaluationError, EvaluationTimeoutError, Evaluator, RubyEvaluator
from .script import build_update_script

__all__ = [
    "RubySassEngine",
    "ProcessingError",
    "build_update_script",
    "Evaluator",
    "RubyEvaluator",
    "EvaluationError",
    "EvaluationTimeoutError",
]
