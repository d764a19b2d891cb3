"""
RubySassEngine: transform(content) -> css through a generated Ruby Sass script.

Requires and load paths are insertion-ordered and deduplicated; blank values
are ignored. transform() is serialized per instance because the underlying
evaluator is not reentrant.
"""

import logging
import threading
from typing import Any

from sassbridge.core.config import settings, split_csv

from .evaluator import EvaluationError, Evaluator, RubyEvaluator
from .script import build_update_script

_log = logging.getLogger(__name__)

RUBY_GEM_REQUIRE = "rubygems"
SASS_PLUGIN_REQUIRE = "sass/plugin"
SASS_ENGINE_REQUIRE = "sass/engine"

DEFAULT_REQUIRES = (RUBY_GEM_REQUIRE, SASS_PLUGIN_REQUIRE, SASS_ENGINE_REQUIRE)


class ProcessingError(RuntimeError):
    """Raised when the Sass script fails to evaluate. The evaluator error is kept as cause."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


def _add_trimmed(target: dict[str, None], value: str | None) -> None:
    if value is not None and value.strip():
        target.setdefault(value.strip(), None)


class RubySassEngine:
    """
    Compile SCSS to CSS with Ruby Sass.

    add_require / add_load_path may be called at any time; a running transform
    keeps the snapshot it took and later calls see the new entries.
    """

    def __init__(self, evaluator: Evaluator | None = None) -> None:
        self._evaluator = evaluator
        # dicts keep insertion order and dedupe keys
        self._requires: dict[str, None] = dict.fromkeys(DEFAULT_REQUIRES)
        self._load_paths: dict[str, None] = {}
        self._config_lock = threading.Lock()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, evaluator: Evaluator | None = None) -> "RubySassEngine":
        """Engine with SASS_EXTRA_REQUIRES and SASS_LOAD_PATHS applied."""
        engine = cls(evaluator)
        for name in split_csv(settings.SASS_EXTRA_REQUIRES):
            engine.add_require(name)
        for path in split_csv(settings.SASS_LOAD_PATHS):
            engine.add_load_path(path)
        return engine

    @property
    def requires(self) -> tuple[str, ...]:
        with self._config_lock:
            return tuple(self._requires)

    @property
    def load_paths(self) -> tuple[str, ...]:
        with self._config_lock:
            return tuple(self._load_paths)

    def add_require(self, require: str | None) -> None:
        """Add a Ruby require, e.g. 'bourbon'. Adding the same require twice is a no-op."""
        with self._config_lock:
            _add_trimmed(self._requires, require)

    def add_load_path(self, load_path: str | None) -> None:
        """Add a directory searched for @import; same rules as add_require."""
        with self._config_lock:
            _add_trimmed(self._load_paths, load_path)

    def _get_evaluator(self) -> Evaluator:
        if self._evaluator is not None:
            return self._evaluator
        return RubyEvaluator()

    def transform(self, content: str | None) -> str:
        """
        Transform Sass content into css. Empty or None content returns '' without evaluating.
        Raises ProcessingError when evaluation fails; there is no retry.
        """
        if not content:
            return ""
        with self._lock:
            script = build_update_script(content, self.requires, self.load_paths)
            _log.debug("Sass script: %s", script)
            try:
                result: Any = self._get_evaluator().evaluate(script)
            except EvaluationError as e:
                _log.warning("Sass evaluation failed: %s", e)
                raise ProcessingError(str(e), e) from e
            return str(result)

    process = transform
