"""I/O utilities: filesystem checks and taxonomy and schema file reading/writing."""

from infrastructure.io.fs import describe_io_error, ensure_exists
from infrastructure.io.taxonomy_files import (
    read_document_json,
    read_schema_file,
    read_taxonomy_file,
    write_taxonomy_file,
)

__all__ = [
    "ensure_exists",
    "describe_io_error",
    "read_taxonomy_file",
    "read_document_json",
    "read_schema_file",
    "write_taxonomy_file",
]
