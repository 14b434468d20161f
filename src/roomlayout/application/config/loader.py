"""Layout document loading and saving with comprehensive error handling.

This module reads and writes layout JSON files. File system errors, JSON
syntax errors and schema violations are all reported through
LayoutParseError with clear, actionable messages.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from roomlayout.application.config.schema import LayoutDocument

if TYPE_CHECKING:
    from roomlayout.application.engine import LayoutEngine


class LayoutParseError(Exception):
    """Exception raised for malformed or schema-violating layout documents.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the layout file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("room", "width"))
        'room.width'
        >>> _format_json_path(("objects", 2, "w"))
        'objects[2].w'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message dictionaries."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Layout validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def parse_layout_document(data: Any, path: Path | None = None) -> LayoutDocument:
    """Validate already-decoded JSON against the layout schema.

    Raises:
        LayoutParseError: With error_type "validation" if the data does not
            match the schema.
    """
    if not isinstance(data, dict):
        raise LayoutParseError(
            message="Layout document must be a JSON object",
            error_type="validation",
            path=path,
        )
    try:
        return LayoutDocument.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise LayoutParseError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def read_layout_file(path: Path) -> dict[str, Any]:
    """Read and decode a layout file without applying it.

    The decoded document is schema-checked so callers get every
    structural error before touching any session state.

    Raises:
        LayoutParseError: If the file is missing, unreadable, not valid
            JSON or does not match the schema.
    """
    if not path.exists():
        raise LayoutParseError(
            message=f"Layout file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise LayoutParseError(
            message=f"Permission denied reading layout file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise LayoutParseError(
            message=f"Error reading layout file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise LayoutParseError(
            message=f"Invalid JSON in layout file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    parse_layout_document(data, path)
    return data


def load_layout(engine: LayoutEngine, path: Path) -> None:
    """Load a layout file into an engine, replacing its session.

    Example:
        >>> engine = LayoutEngine()
        >>> try:
        ...     load_layout(engine, Path("bedroom.json"))
        ... except LayoutParseError as e:
        ...     print(f"Error: {e}")
    """
    data = read_layout_file(path)
    try:
        engine.load_document(data)
    except LayoutParseError as e:
        e.path = path
        raise


def load_layout_from_dict(engine: LayoutEngine, data: dict[str, Any]) -> None:
    """Load an in-memory layout document into an engine."""
    engine.load_document(data)


def dump_layout(engine: LayoutEngine, path: Path) -> Path:
    """Write the engine's session to ``path`` as indented JSON."""
    path.write_text(
        json.dumps(engine.to_document(), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return path
