"""Argument Validation: structural checks of tool arguments against input schemas.

Invariants:
    - Only required fields are checked: presence (not None) + JSON-Schema primitive type
    - bool never satisfies "integer" or "number" (bool is an int subclass in Python)
    - Every offending field is named in the raised ToolValidationError
    - Pure: no IO, never mutates input_data

Design Decisions:
    - No deep semantic validation (email format, id existence): the CRM owns that
    - Handlers re-check identifiers via require_int so they fail fast even when
      called outside the dispatcher
"""

from typing import Any

from crm_bridge.core.errors import ToolValidationError

_TYPE_CHECKS = {
    "string": lambda v: isinstance(v, str),
    "integer": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "number": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    "boolean": lambda v: isinstance(v, bool),
    "array": lambda v: isinstance(v, list),
    "object": lambda v: isinstance(v, dict),
}


def find_argument_problems(schema: dict, input_data: Any) -> list[tuple[str, str]]:
    """Return (field, problem) pairs; empty list means the arguments are acceptable."""
    if not isinstance(input_data, dict):
        return [("arguments", "must be an object")]
    properties = schema.get("properties", {})
    problems = []
    for name in schema.get("required", []):
        value = input_data.get(name)
        if value is None:
            problems.append((name, "is required"))
            continue
        expected = properties.get(name, {}).get("type")
        check = _TYPE_CHECKS.get(expected)
        if check and not check(value):
            problems.append((name, f"must be of type {expected}"))
    return problems


def validate_arguments(tool_name: str, schema: dict, input_data: Any) -> None:
    """Raise ToolValidationError naming every offending field."""
    problems = find_argument_problems(schema, input_data)
    if not problems:
        return
    details = "; ".join(f"'{name}' {problem}" for name, problem in problems)
    raise ToolValidationError(
        f"Invalid arguments for '{tool_name}': {details}",
        fields=[name for name, _ in problems],
    )


def require_int(input_data: dict, key: str) -> int:
    """Return input_data[key] as an identifier or raise before any network call."""
    value = input_data.get(key)
    if value is None:
        raise ToolValidationError(f"'{key}' is required", fields=[key])
    if isinstance(value, bool) or not isinstance(value, int):
        raise ToolValidationError(f"'{key}' must be an integer", fields=[key])
    return value


def require_list(input_data: dict, key: str) -> list:
    value = input_data.get(key)
    if not isinstance(value, list):
        raise ToolValidationError(f"'{key}' must be an array", fields=[key])
    return value


def pick(input_data: dict, *keys: str) -> dict:
    """Subset of input_data with the given keys, skipping absent/None values."""
    return {k: input_data[k] for k in keys if input_data.get(k) is not None}
