"""
Settings for the Sass bridge, loaded from environment variables and .env.

- SASS_RUBY_BINARY: interpreter used by RubyEvaluator.
- SASS_EXEC_TIMEOUT: seconds before RubyEvaluator aborts an evaluation (0 = no limit).
- SASS_EXTRA_REQUIRES / SASS_LOAD_PATHS: comma-separated, used by RubySassEngine.from_settings().
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


def split_csv(raw: str | None) -> list[str]:
    """Split a comma-separated setting; strip items and drop blanks."""
    return [s.strip() for s in (raw or "").split(",") if s.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    SASS_RUBY_BINARY: str = "ruby"
    SASS_EXEC_TIMEOUT: int = 0
    SASS_EXTRA_REQUIRES: str = ""
    SASS_LOAD_PATHS: str = ""


settings = Settings()
