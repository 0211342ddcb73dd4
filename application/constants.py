"""Application-level constants."""

from pathlib import Path

# Markdown rendering
PATH_ARROW = " → "
UNGROUPED_LABEL = "(unspecified)"

# Output filenames
GROUP_SUMMARY_FILENAME = "group_summary.csv"
LOG_FILENAME = "browser.log"

# Output directory structure
OUTPUT_ROOT = Path("outputs")
