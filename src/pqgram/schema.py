"""JSON schema for serialized trees."""

from __future__ import annotations

from typing import Any, Dict

from jsonschema import Draft7Validator, ValidationError

TREE_JSON_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "https://pqgram.dev/schema/node.json",
    "title": "pq-gram tree node",
    "type": "object",
    "required": ["label"],
    "properties": {
        "label": {"type": "string"},
        "attributes": {"type": "object"},
        "children": {
            "type": "array",
            "items": {"$ref": "#"},
        },
    },
    "additionalProperties": False,
}

_VALIDATOR = Draft7Validator(TREE_JSON_SCHEMA)


def validate_tree_dict(data: Any) -> None:
    """Raise ``ValueError`` if ``data`` is not a serialized tree."""
    try:
        _VALIDATOR.validate(data)
    except ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise ValueError(f"Invalid tree at {location}: {exc.message}") from exc
