"""
Logging setup with contextvars-based metadata injection.

- Adds a short document tag and the active view into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import hashlib
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_doc_tag = contextvars.ContextVar("doc_tag", default="-")
cv_view = contextvars.ContextVar("view", default="-")

# Full document path kept for metadata (not printed every line)
cv_document = contextvars.ContextVar("document", default="-")


def make_doc_tag(document: str, length: int = 8) -> str:
    """
    Stable short tag derived from the document path.
    Uses BLAKE2s so the same file always gets the same tag across runs.
    """
    h = hashlib.blake2s(document.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.doc = cv_doc_tag.get() or "-"
        record.view = cv_view.get() or "-"
        return True


def set_log_context(
    *,
    document: str | Path | None = None,
    view: str | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if document is not None:
        cv_document.set(str(document))
        cv_doc_tag.set(make_doc_tag(str(document)))

    if view is not None:
        cv_view.set(str(view))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "doc_tag": str(cv_doc_tag.get() or "-"),
        "document": str(cv_document.get() or "-"),
        "view": str(cv_view.get() or "-"),
    }


def clear_view_context() -> None:
    """Reset view context to default (keep document info)."""
    cv_view.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file (console only when None)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    # Formatter includes context fields injected by ContextInjectFilter
    console_fmt = "%(asctime)s [%(levelname)s] doc=%(doc)s view=%(view)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | doc=%(doc)s view=%(view)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    # Console handler on stderr; stdout carries the rendered Markdown
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    # File handler (detailed, DEBUG+, with rotation)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
