"""Parameter Object conversion.

Swagger 2.0 parameters describe their type inline (`type`, `format`,
`minimum`, ...); OpenAPI 3 moves all of that into a nested `schema`.
Body parameters are not parameters in OpenAPI 3 and are dropped here;
operations lift them into a request body instead.
"""

from .fields import pick
from .refs import convert_ref_node
from .schema import convert_schema

PARAMETER_FIELDS = (
    "name",
    "in",
    "description",
    "required",
    "deprecated",
    "allowEmptyValue",
    "style",
    "explode",
    "allowReserved",
)

EXAMPLE_FIELDS = ("example", "examples")

LEGACY_SCHEMA_FIELDS = (
    "format",
    "minimum",
    "maximum",
    "minLength",
    "maxLength",
    "pattern",
    "enum",
    "default",
    "multipleOf",
    "minItems",
    "maxItems",
    "uniqueItems",
)


def is_body_parameter(param: dict) -> bool:
    return isinstance(param, dict) and param.get("in") == "body"


def convert_parameters(parameters: list[dict] | None) -> list[dict]:
    """Convert a parameter list, keeping input order and duplicates.

    Entries that are not mappings are skipped; the input validator reports them.
    """
    if not parameters:
        return []
    return [
        convert_parameter(p)
        for p in parameters
        if isinstance(p, dict) and not is_body_parameter(p)
    ]


def convert_parameter(param: dict) -> dict:
    if "$ref" in param:
        return convert_ref_node(param)

    converted = pick(param, PARAMETER_FIELDS)
    if param.get("schema") is not None:
        converted["schema"] = convert_schema(param["schema"])
    else:
        schema = convert_legacy_parameter_schema(param)
        if schema is not None:
            converted["schema"] = schema
    converted.update(pick(param, EXAMPLE_FIELDS))
    return converted


def convert_legacy_parameter_schema(param: dict) -> dict | None:
    """Build a schema from the inline type fields of a Swagger 2.0 parameter.

    Returns None when the parameter declares no `type`.
    """
    if not param.get("type"):
        return None

    schema = {"type": param["type"]}
    schema.update(pick(param, LEGACY_SCHEMA_FIELDS))
    if param["type"] == "array" and param.get("items") is not None:
        schema["items"] = convert_schema(param["items"])
    return schema
