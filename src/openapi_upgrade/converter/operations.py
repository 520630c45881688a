"""Path Item, Operation, request body and response conversion."""

import copy
import logging

from .fields import compact, pick
from .parameters import convert_parameters, is_body_parameter
from .refs import convert_ref_node
from .schema import convert_schema
from .security import convert_security

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "head", "options", "trace")

DEFAULT_MEDIA_TYPE = "application/json"

OPERATION_METADATA = ("summary", "description", "tags", "externalDocs", "operationId")


def convert_paths(paths: dict | None) -> dict:
    """Convert every path item. Unknown HTTP methods are dropped.

    Entries that are not mappings (e.g. `"/a": null`) are skipped; the input
    validator reports them.
    """
    if not paths:
        return {}

    converted = {}
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            logger.debug("Skipping path %r: path item is not a mapping", path)
            continue
        item = {}
        for method in HTTP_METHODS:
            if isinstance(path_item.get(method), dict):
                item[method] = convert_operation(path_item[method])
        if path_item.get("parameters") is not None:
            item["parameters"] = convert_parameters(path_item["parameters"])
        converted[path] = item
    return converted


def convert_operation(operation: dict) -> dict:
    parameters = operation.get("parameters")

    converted = pick(operation, OPERATION_METADATA)
    converted.update(
        compact(
            parameters=convert_parameters(parameters) if parameters is not None else None,
            requestBody=resolve_request_body(operation),
            responses=convert_responses(operation.get("responses")),
            callbacks=copy.deepcopy(operation.get("callbacks")),
            deprecated=operation.get("deprecated"),
            security=convert_security(operation.get("security")),
            servers=copy.deepcopy(operation.get("servers")),
        )
    )
    return converted


def resolve_request_body(operation: dict) -> dict | None:
    """Pick the request body of an operation.

    The modern `requestBody` always wins. Otherwise the first `in: body`
    parameter is lifted into a JSON request body. Neither present: None.
    """
    if isinstance(operation.get("requestBody"), dict):
        return convert_request_body(operation["requestBody"])

    body_param = find_body_parameter(operation.get("parameters"))
    if body_param is not None:
        logger.debug("Lifting body parameter %r into requestBody", body_param.get("name"))
        return lift_body_parameter(body_param)

    return None


def find_body_parameter(parameters: list[dict] | None) -> dict | None:
    for param in parameters or ():
        if is_body_parameter(param):
            return param
    return None


def lift_body_parameter(param: dict) -> dict:
    media = compact(schema=convert_schema(param.get("schema")))
    return compact(
        description=param.get("description"),
        content={DEFAULT_MEDIA_TYPE: media},
        required=param.get("required"),
    )


def convert_request_body(body: dict) -> dict:
    if "$ref" in body:
        return convert_ref_node(body)
    return compact(
        description=body.get("description"),
        content=convert_content(body.get("content")),
        required=body.get("required"),
    )


def convert_responses(responses: dict | None) -> dict:
    """Convert a status code -> response map. Always returns a dict."""
    if not responses:
        return {}
    # YAML reads unquoted status codes as integers
    return {
        str(status): convert_response(response)
        for status, response in responses.items()
        if isinstance(response, dict)
    }


def convert_response(response: dict) -> dict:
    if "$ref" in response:
        return convert_ref_node(response)

    if response.get("content") is not None:
        content = convert_content(response["content"])
    elif response.get("schema") is not None:
        content = {DEFAULT_MEDIA_TYPE: {"schema": convert_schema(response["schema"])}}
    else:
        content = None

    return compact(
        description=response.get("description"),
        headers=copy.deepcopy(response.get("headers")),
        content=content,
        links=copy.deepcopy(response.get("links")),
    )


def convert_content(content: dict | None) -> dict | None:
    """Convert a media type -> Media Type Object map."""
    if content is None:
        return None

    converted = {}
    for media_type, media in content.items():
        if not isinstance(media, dict):
            continue
        converted[media_type] = compact(
            schema=convert_schema(media.get("schema")),
            example=copy.deepcopy(media.get("example")),
            examples=copy.deepcopy(media.get("examples")),
            encoding=copy.deepcopy(media.get("encoding")),
        )
    return converted
