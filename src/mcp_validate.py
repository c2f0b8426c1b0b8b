"""JSON Schema validation helpers for MCP tool input contracts.

Thin wrapper around jsonschema's Draft7Validator that reports the first
error with its JSON path.
"""

from __future__ import annotations

from typing import Any, Dict

from jsonschema import Draft7Validator


class SchemaError(ValueError):
    """Raised when data fails to validate against a provided schema."""


def _first_error_message(schema: Dict[str, Any], data: Any, label: str) -> str:
    validator = Draft7Validator(schema)
    errs = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if not errs:
        return ""
    first = errs[0]
    path = "/".join([str(p) for p in first.path])
    return f"Invalid {label} at '{path}': {first.message}"


def validate_input(schema: Dict[str, Any], data: Any) -> None:
    """Validate tool input strictly and raise on the first error.

    Args:
        schema: Draft-07 JSON Schema dict.
        data:   Input payload to validate.
    """
    msg = _first_error_message(schema, data, "input")
    if msg:
        raise SchemaError(msg)
