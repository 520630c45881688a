"""Reusable component tables.

Each table is taken from OpenAPI 3 `components` when the document has it,
otherwise from the matching Swagger 2.0 top-level table. The two sources are
never merged.
"""

import copy

from .operations import convert_response
from .parameters import convert_parameter, is_body_parameter
from .schema import convert_schemas
from .security import convert_security_schemes

# Copied as-is from `components`; nested schemas in them are not converted.
VERBATIM_CATEGORIES = ("examples", "requestBodies", "headers", "links", "callbacks")


def convert_components(document: dict) -> dict | None:
    """Build the `components` object, or None when every table is empty."""
    components = document.get("components") or {}
    converted = {}

    schemas = _modern_or_legacy(components, "schemas", document, "definitions")
    if schemas is not None:
        converted["schemas"] = convert_schemas(schemas)

    parameters = _modern_or_legacy(components, "parameters", document, "parameters")
    if parameters is not None:
        converted["parameters"] = convert_parameter_definitions(parameters)

    responses = _modern_or_legacy(components, "responses", document, "responses")
    if responses is not None:
        converted["responses"] = convert_response_definitions(responses)

    schemes = _modern_or_legacy(components, "securitySchemes", document, "securityDefinitions")
    if schemes is not None:
        converted["securitySchemes"] = convert_security_schemes(schemes)

    for category in VERBATIM_CATEGORIES:
        if components.get(category) is not None:
            converted[category] = copy.deepcopy(components[category])

    return converted or None


def convert_parameter_definitions(parameters: dict) -> dict:
    """Convert named parameters. Body parameter definitions are dropped."""
    return {
        name: convert_parameter(param)
        for name, param in parameters.items()
        if isinstance(param, dict) and not is_body_parameter(param)
    }


def convert_response_definitions(responses: dict) -> dict:
    return {
        name: convert_response(response)
        for name, response in responses.items()
        if isinstance(response, dict)
    }


def _modern_or_legacy(components: dict, modern_key: str, document: dict, legacy_key: str):
    if components.get(modern_key) is not None:
        return components[modern_key]
    return document.get(legacy_key)
