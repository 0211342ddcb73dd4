"""
Observability: structured logging and context management.

Provides:
- Contextual logging with document tag and active view
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    ContextInjectFilter,
    clear_view_context,
    configure_logging,
    get_log_context,
    make_doc_tag,
    set_log_context,
)

__all__ = [
    "ContextInjectFilter",
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "clear_view_context",
    "make_doc_tag",
]
