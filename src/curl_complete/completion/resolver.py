"""Reference resolution against the OpenAPI document's component tables.

A reference is any mapping with a ``$ref`` key. Its target is looked up by
the last path segment in the component table for the item's kind, so
``#/components/parameters/limitParam`` resolves to
``components["parameters"]["limitParam"]``. Resolution repeats until an
inline item is reached.
"""

from enum import Enum

from curl_complete.errors import SpecParseError, UnresolvedReferenceError


class ComponentKind(str, Enum):
    """Component tables a reference may point into."""

    PARAMETER = "parameters"
    REQUEST_BODY = "requestBodies"
    RESPONSE = "responses"
    SCHEMA = "schemas"


def is_reference(item) -> bool:
    return isinstance(item, dict) and "$ref" in item


def resolve(item, kind: ComponentKind, components: dict | None) -> dict:
    """Return the inline item behind ``item``, following references."""
    return _resolve(item, kind, components, seen=set())


def _resolve(item, kind: ComponentKind, components: dict | None, seen: set[str]) -> dict:
    if not is_reference(item):
        if not isinstance(item, dict):
            raise SpecParseError(f"expected a {kind.value} mapping, got {type(item).__name__}")
        return item

    reference = item["$ref"]
    if not isinstance(reference, str):
        raise UnresolvedReferenceError(f"$ref must be a string, got {reference!r}")
    if reference in seen:
        raise UnresolvedReferenceError(f"circular reference: {reference}")
    seen.add(reference)

    key = reference.rpartition("/")[2]
    if components is None:
        raise UnresolvedReferenceError(f"cannot resolve {reference}: spec has no components")

    table = components.get(kind.value) or {}
    if key not in table:
        raise UnresolvedReferenceError(f"key {key} is missing from components.{kind.value}")

    return _resolve(table[key], kind, components, seen)
