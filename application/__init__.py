"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the browse workflow and its Markdown presentation.
"""

from application.browse import BrowseResult, browse, check_against_schema, check_taxonomy, filters_from_input
from application.render import (
    render_item,
    render_results,
    render_schema_problems,
    render_taxonomy,
    render_validation_errors,
)

__all__ = [
    # Main workflows
    "browse",
    "check_taxonomy",
    "check_against_schema",
    "filters_from_input",
    "BrowseResult",
    # Presentation
    "render_taxonomy",
    "render_results",
    "render_item",
    "render_validation_errors",
    "render_schema_problems",
]
