"""Schema Object conversion.

Walks a schema tree and rebuilds it keyword by keyword. `$ref` is treated
as a leaf: references are rewritten, never resolved, so cyclic schema
graphs need no special handling.
"""

import copy

from .fields import pick
from .refs import convert_ref_node

COMMON_KEYWORDS = (
    "type",
    "format",
    "title",
    "description",
    "default",
    "example",
    "examples",
    "nullable",
    "readOnly",
    "writeOnly",
    "deprecated",
    "discriminator",
    "xml",
    "externalDocs",
)

TYPE_KEYWORDS = {
    "object": ("properties", "required", "maxProperties", "minProperties", "additionalProperties"),
    "array": ("items", "maxItems", "minItems", "uniqueItems"),
    "string": ("maxLength", "minLength", "pattern", "enum"),
    "number": ("maximum", "minimum", "exclusiveMaximum", "exclusiveMinimum", "multipleOf"),
    "integer": ("maximum", "minimum", "exclusiveMaximum", "exclusiveMinimum", "multipleOf"),
}

COMPOSITE_KEYWORDS = ("allOf", "anyOf", "oneOf")

# Keywords holding nested schemas. A null value here means "no schema".
NESTED_KEYWORDS = ("properties", "items")


def convert_schema(schema):
    """Convert one schema node (and everything nested under it).

    Returns None for a missing schema. Non-mapping schemas, such as the
    boolean schemas allowed by OpenAPI 3.1, are returned unchanged.
    """
    if schema is None:
        return None
    if not isinstance(schema, dict):
        return schema
    if "$ref" in schema:
        return convert_ref_node(schema)

    converted = pick(schema, COMMON_KEYWORDS)

    for type_name in _declared_types(schema):
        for keyword in TYPE_KEYWORDS.get(type_name, ()):
            if keyword not in schema or keyword in converted:
                continue
            value = _convert_keyword(keyword, schema[keyword])
            if value is not None or keyword not in NESTED_KEYWORDS:
                converted[keyword] = value

    for keyword in COMPOSITE_KEYWORDS:
        if schema.get(keyword) is not None:
            converted[keyword] = [convert_schema(s) for s in schema[keyword]]
    if schema.get("not") is not None:
        converted["not"] = convert_schema(schema["not"])

    return converted


def convert_schemas(schemas: dict | None) -> dict | None:
    """Convert a name -> schema table, e.g. `definitions` or `components.schemas`."""
    if schemas is None:
        return None
    return {name: convert_schema(schema) for name, schema in schemas.items()}


def _declared_types(schema: dict) -> list[str]:
    # OpenAPI 3.1 allows `type` to be a list such as ["string", "null"]
    declared = schema.get("type")
    if isinstance(declared, list):
        return [t for t in declared if isinstance(t, str)]
    if isinstance(declared, str):
        return [declared]
    return []


def _convert_keyword(keyword: str, value):
    if keyword == "properties":
        return convert_schemas(value)
    if keyword == "items":
        if isinstance(value, list):
            return [convert_schema(item) for item in value]
        return convert_schema(value)
    if keyword == "additionalProperties" and isinstance(value, dict):
        return convert_schema(value)
    return copy.deepcopy(value)
