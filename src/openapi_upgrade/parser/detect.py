"""Detect which Swagger/OpenAPI version a parsed document claims to be."""

SWAGGER_2 = "swagger-2.0"
OPENAPI_30 = "openapi-3.0"
OPENAPI_31 = "openapi-3.1"
UNKNOWN = "unknown"


def detect_version(document: dict) -> str:
    """Return one of 'swagger-2.0', 'openapi-3.0', 'openapi-3.1' or 'unknown'.

    Only the version marker is looked at; the rest of the document is not
    checked here.
    """
    if not isinstance(document, dict):
        return UNKNOWN

    swagger = document.get("swagger")
    if swagger is not None and str(swagger).startswith("2."):
        return SWAGGER_2

    openapi = document.get("openapi")
    if openapi is not None:
        openapi = str(openapi)
        if openapi.startswith("3.0"):
            return OPENAPI_30
        if openapi.startswith("3.1"):
            return OPENAPI_31

    return UNKNOWN
