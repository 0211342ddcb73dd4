"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Taxonomy file reading and writing
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import BrowserConfig, load_browser_config
from infrastructure.io import read_taxonomy_file, write_taxonomy_file

__all__ = [
    # Configuration (most commonly used)
    "load_browser_config",
    "BrowserConfig",
    # Taxonomy files
    "read_taxonomy_file",
    "write_taxonomy_file",
]
