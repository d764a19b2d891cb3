"""
sassbridge: Sass/SCSS to CSS through an embedded Ruby Sass engine, plus HTTP helpers.
"""

from sassbridge.engines.sass import ProcessingError, RubySassEngine

__all__ = [
    "ProcessingError",
    "RubySassEngine",
]
