"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from domain.query.sorting import DEFAULT_LEADING_ARTICLES
from domain.taxonomy.models import GenusScope

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ValidationConfig(BaseModel):
    """How taxonomy validation results are treated."""

    enforce_facet_vocabulary: bool = Field(
        default=True,
        description="If true, facet values must be members of the dimension's declared values.",
    )
    strict: bool = Field(
        default=False,
        description="If true, the browser refuses to display a taxonomy that has validation errors.",
    )
    schema_file: Path | None = Field(
        default=None,
        description="Optional JSON Schema file the raw document is also checked against.",
    )


class SortingConfig(BaseModel):
    """Library-catalog sorting options."""

    leading_articles: list[str] = Field(default_factory=lambda: list(DEFAULT_LEADING_ARTICLES))

    @field_validator("leading_articles")
    @classmethod
    def _clean_articles(cls, value: list[str]) -> list[str]:
        cleaned = [str(a).strip().casefold() for a in value if str(a).strip()]
        if not cleaned:
            raise ValueError("sorting.leading_articles must contain at least one article")
        return cleaned


class FilteringConfig(BaseModel):
    """Filter matching options."""

    genus_scope: GenusScope = GenusScope.LEADING
    warn_on_dropped_tokens: bool = Field(
        default=True,
        description="Log a warning for each facet token without '=' (the token is still ignored).",
    )


class LoggingConfig(BaseModel):
    """Console/file log levels and optional log file."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path | None = None

    @field_validator("console_level", "file_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unknown log level {value!r}; expected one of {list(_LEVEL_NAMES)}")
        return level

    @property
    def console_level_no(self) -> int:
        return logging.getLevelName(self.console_level)

    @property
    def file_level_no(self) -> int:
        return logging.getLevelName(self.file_level)


class BrowserConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from configs/browser.yaml (all sections optional)
    - Consumed by the application layer and the CLI entrypoint
    """

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    sorting: SortingConfig = Field(default_factory=SortingConfig)
    filtering: FilteringConfig = Field(default_factory=FilteringConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
