"""Verification helpers for test suites.

Use these to check that a produced value, such as an HTTP response body,
is exactly the record currently declared under a key:

    def test_forbidden_body(client, errors):
        response = client.get("/admin")
        assert_record_matches(errors, "not_authorized", response.json())
"""

from typing import Any

from canon.listing import to_json_safe
from canon.registry import Registry


def _same_json(expected: Any, actual: Any) -> bool:
    """Compare JSON-safe values as JSON documents.

    Unlike ==, True is not 1 and 401 is not 401.0.
    """
    if isinstance(expected, dict):
        return (
            isinstance(actual, dict)
            and expected.keys() == actual.keys()
            and all(_same_json(value, actual[field]) for field, value in expected.items())
        )
    if isinstance(expected, list):
        return (
            isinstance(actual, list)
            and len(expected) == len(actual)
            and all(_same_json(item, other) for item, other in zip(expected, actual))
        )
    return type(expected) is type(actual) and expected == actual


def record_matches(registry: Registry, key: str, produced: Any) -> bool:
    """Check a produced value against the registered output record.

    Both sides are compared in their JSON-safe form, so a value that went
    through a JSON round trip still matches a record holding dates. Scalars
    must also agree on type: a boolean never matches a number, nor an
    integer a float.

    Args:
        registry: Registry holding the declaration
        key: Declared key
        produced: Value to check

    Returns:
        True if produced equals the current output record exactly

    Raises:
        UnknownKeyError: If key was not declared
    """
    expected = registry.lookup(key)
    return _same_json(to_json_safe(expected), to_json_safe(produced))


def describe_mismatch(registry: Registry, key: str, produced: Any) -> list[str]:
    """List the differences between produced and the registered record.

    Returns:
        One line per difference; empty when the values match
    """
    expected = to_json_safe(registry.lookup(key))
    actual = to_json_safe(produced)

    if not isinstance(expected, dict):
        if _same_json(expected, actual):
            return []
        return [f"expected {expected!r}, got {actual!r}"]
    if not isinstance(actual, dict):
        return [f"expected a mapping, got {type(produced).__name__}"]

    problems: list[str] = []
    for field, value in expected.items():
        if field not in actual:
            problems.append(f"missing field {field!r}")
        elif not _same_json(value, actual[field]):
            problems.append(f"field {field!r}: expected {value!r}, got {actual[field]!r}")
    for field in actual:
        if field not in expected:
            problems.append(f"unexpected field {field!r}")
    return problems


def assert_record_matches(registry: Registry, key: str, produced: Any) -> None:
    """Assert that produced is exactly the record registered under key.

    Raises:
        AssertionError: With one line per differing field
        UnknownKeyError: If key was not declared
    """
    problems = describe_mismatch(registry, key, produced)
    if problems:
        details = "\n".join(f"  - {problem}" for problem in problems)
        raise AssertionError(f"Value does not match {registry.name}[{key!r}]:\n{details}")
