"""Parse and serialize taxonomy documents (JSON bytes <-> HybridTaxonomy)."""

import json

from pydantic import ValidationError as PydanticValidationError

from domain.taxonomy.models import HybridTaxonomy


class LoadError(ValueError):
    """Raised when a document cannot be parsed or has the wrong shape."""

    def __init__(self, message: str, problems: list[str] | None = None) -> None:
        super().__init__(message)
        self.problems = list(problems or [])


def _format_problem(error: dict) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ())) or "<document>"
    return f"{loc}: {error.get('msg', 'invalid value')}"


def load(data: bytes | str) -> HybridTaxonomy:
    """
    Parse a JSON taxonomy document.

    This is a pure function - it does NOT perform file I/O.
    Reading the bytes happens in infrastructure.io.

    Args:
        data: Raw JSON document (bytes are decoded as UTF-8)

    Returns:
        HybridTaxonomy with facet value shapes exactly as in the source

    Raises:
        LoadError: If the JSON is unparsable or a required field is missing or wrong-shaped
    """
    try:
        return HybridTaxonomy.model_validate_json(data)
    except PydanticValidationError as e:
        problems = [_format_problem(err) for err in e.errors()]
        raise LoadError(
            f"Malformed taxonomy document ({len(problems)} problem(s)): " + "; ".join(problems),
            problems=problems,
        ) from e


def save(taxonomy: HybridTaxonomy) -> bytes:
    """
    Serialize a taxonomy to pretty-printed UTF-8 JSON using the document field names.

    Unknown keys captured on load are written back. Optional fields that were
    absent on load and are still empty stay absent, so a load/save cycle
    reproduces the document.
    """
    payload = taxonomy.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")
