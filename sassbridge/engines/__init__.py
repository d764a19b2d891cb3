"""
Engines: Sass (Ruby Sass through a generated script).
"""

from sassbridge.engines.sass import RubySassEngine

__all__ = [
    "RubySassEngine",
]
