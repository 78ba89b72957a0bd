# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Response shape and value checks.

Backend responses are loosely typed JSON. Checks validate the fields a case
relies on at the point of use and raise ResponseAssertionError with a
precise message, instead of assuming structure.
"""

from collections.abc import Mapping
from typing import Any

from clinic_check.core.errors import ResponseAssertionError


def require_object(payload: Any, context: str) -> Mapping[str, Any]:
    """Require the payload to be a JSON object."""
    if not isinstance(payload, Mapping):
        raise ResponseAssertionError(
            f"{context}: expected a JSON object, got {type(payload).__name__}"
        )
    return payload


def require_present(payload: Any, field: str, context: str) -> Any:
    """Require a field to be present (any value, including falsy ones)."""
    data = require_object(payload, context)
    if field not in data:
        raise ResponseAssertionError(f"{context}: missing required field '{field}'")
    return data[field]


def require_truthy(payload: Any, field: str, context: str) -> Any:
    """Require a field to be present and truthy."""
    value = require_present(payload, field, context)
    if not value:
        raise ResponseAssertionError(f"{context}: field '{field}' is {value!r}")
    return value


def require_success(payload: Any, context: str) -> Mapping[str, Any]:
    """Require the backend's success indicator to be set."""
    require_truthy(payload, "success", context)
    return require_object(payload, context)


def require_mapping_field(payload: Any, field: str, context: str) -> Mapping[str, Any]:
    """Require a field holding a JSON object."""
    value = require_present(payload, field, context)
    if not isinstance(value, Mapping):
        raise ResponseAssertionError(
            f"{context}: field '{field}' must be an object, got {type(value).__name__}"
        )
    return value


def require_sequence_field(payload: Any, field: str, context: str) -> list[Any]:
    """Require a field holding a JSON array (a list, not an object)."""
    value = require_present(payload, field, context)
    if not isinstance(value, list):
        raise ResponseAssertionError(
            f"{context}: field '{field}' must be an array, got {type(value).__name__}"
        )
    return value


def _strict_equal(expected: Any, actual: Any) -> bool:
    # bool is an int subclass; keep True != 1 and False != 0
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual
    return bool(expected == actual)


def diff_fields(expected: Mapping[str, Any], actual: Any, prefix: str = "") -> list[str]:
    """List every written field whose stored value differs.

    Nested objects are compared field by field; fields the backend adds
    beyond the expected ones are ignored.

    Returns:
        One "path: expected X, got Y" entry per mismatch, empty when equal.
    """
    mismatches: list[str] = []
    if not isinstance(actual, Mapping):
        label = prefix.rstrip(".") or "<root>"
        return [f"{label}: expected an object, got {actual!r}"]
    for key, want in expected.items():
        path = f"{prefix}{key}"
        if key not in actual:
            mismatches.append(f"{path}: missing")
            continue
        got = actual[key]
        if isinstance(want, Mapping):
            mismatches.extend(diff_fields(want, got, prefix=f"{path}."))
        elif not _strict_equal(want, got):
            mismatches.append(f"{path}: expected {want!r}, got {got!r}")
    return mismatches


def require_fields_equal(expected: Mapping[str, Any], actual: Any, context: str) -> None:
    """Require every expected field to be stored exactly as written."""
    mismatches = diff_fields(expected, actual)
    if mismatches:
        raise ResponseAssertionError(f"{context}: " + "; ".join(mismatches))
