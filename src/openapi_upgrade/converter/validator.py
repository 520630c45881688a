"""Best-effort structural validation of input and output documents.

Problems are returned as ConversionIssue records rather than raised:
validation is advisory and never stops a conversion.
"""

import logging

from pydantic import BaseModel, ValidationError

from openapi_upgrade.parser.base import ConversionIssue
from openapi_upgrade.parser.detect import OPENAPI_30, OPENAPI_31, SWAGGER_2, detect_version
from openapi_upgrade.parser.specs import (
    UNION_TAGS,
    OpenAPI30Document,
    OpenAPI31Document,
    SwaggerDocument,
)

logger = logging.getLogger(__name__)

INPUT_MODELS: dict[str, type[BaseModel]] = {
    SWAGGER_2: SwaggerDocument,
    OPENAPI_30: OpenAPI30Document,
    OPENAPI_31: OpenAPI31Document,
}


def validate_input(document: dict) -> list[ConversionIssue]:
    """Check a Swagger 2.0 / OpenAPI 3.x document before conversion."""
    version = detect_version(document)
    model = INPUT_MODELS.get(version)
    if model is None:
        issue = ConversionIssue(
            stage="input",
            location="",
            message="document declares neither 'swagger: 2.0' nor 'openapi: 3.x'",
        )
        logger.warning("%s", issue)
        return [issue]
    return validate_model(document, model, stage="input")


def validate_output(document: dict) -> list[ConversionIssue]:
    """Check a converted document against the OpenAPI 3.1 structure."""
    return validate_model(document, OpenAPI31Document, stage="output")


def validate_model(document: dict, model: type[BaseModel], stage: str) -> list[ConversionIssue]:
    try:
        model.model_validate(document)
    except ValidationError as e:
        issues = [
            ConversionIssue(stage=stage, location=_format_location(err["loc"]), message=err["msg"])
            for err in e.errors()
        ]
        for issue in issues:
            logger.warning("%s", issue)
        return issues
    logger.debug("%s validation passed (%s)", stage, model.__name__)
    return []


def _format_location(loc: tuple) -> str:
    parts = [str(p) for p in loc if p not in UNION_TAGS]
    return ".".join(parts)
