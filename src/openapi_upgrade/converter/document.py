"""Top-level document assembly and the SpecConverter entry point.

Converts a parsed Swagger 2.0 or OpenAPI 3.0 document into OpenAPI 3.1.
The conversion itself is a pure function of the input tree, and a
SpecConverter keeps no state between runs beyond its `validate` flag.
"""

import copy
import logging

from openapi_upgrade.parser.base import ConversionIssue, ConversionResult
from openapi_upgrade.parser.detect import detect_version

from .components import convert_components
from .fields import compact, pick
from .operations import convert_paths
from .security import convert_security
from .validator import validate_input, validate_output

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.1.0"

DEFAULT_TITLE = "API"
DEFAULT_VERSION = "1.0.0"
DEFAULT_SCHEME = "https"
DEFAULT_HOST = "localhost"
FALLBACK_SERVER_URL = "https://localhost"

INFO_FIELDS = ("description", "termsOfService", "contact", "license")
SERVER_FIELDS = ("url", "description", "variables")
TAG_FIELDS = ("name", "description", "externalDocs")


def convert_document(document: dict) -> dict:
    """Convert a Swagger 2.0 / OpenAPI 3.0 document to OpenAPI 3.1.

    Keys are emitted in the order openapi, info, servers, paths,
    components, security, tags, externalDocs; keys without a value are
    left out.
    """
    return compact(
        openapi=OPENAPI_VERSION,
        info=convert_info(document.get("info")),
        servers=convert_servers(document),
        paths=convert_paths(document.get("paths")),
        components=convert_components(document),
        security=convert_security(document.get("security")),
        tags=convert_tags(document.get("tags")),
        externalDocs=copy.deepcopy(document.get("externalDocs")),
    )


def convert_info(info: dict | None) -> dict:
    if not info or not isinstance(info, dict):
        return {"title": DEFAULT_TITLE, "version": DEFAULT_VERSION}

    converted = {
        "title": info.get("title") or DEFAULT_TITLE,
        "version": str(info.get("version") or DEFAULT_VERSION),
    }
    converted.update(pick(info, INFO_FIELDS))
    return converted


def convert_servers(document: dict) -> list[dict]:
    """Build the server list from `servers`, or from `host`/`basePath`/`schemes`.

    A document with neither gets a single https://localhost placeholder.
    """
    servers = document.get("servers")
    if servers is not None:
        return [pick(server, SERVER_FIELDS) for server in servers if isinstance(server, dict)]

    host = document.get("host")
    base_path = document.get("basePath")
    if host or base_path:
        schemes = document.get("schemes")
        scheme = schemes[0] if schemes else DEFAULT_SCHEME
        return [{"url": f"{scheme}://{host or DEFAULT_HOST}{base_path or ''}"}]

    logger.debug("No server information in document, using %s", FALLBACK_SERVER_URL)
    return [{"url": FALLBACK_SERVER_URL}]


def convert_tags(tags: list[dict] | None) -> list[dict] | None:
    if tags is None:
        return None
    return [pick(tag, TAG_FIELDS) for tag in tags if isinstance(tag, dict)]


class SpecConverter:
    """Converts documents, optionally validating before and after.

    Each run returns its own issues on the ConversionResult.
    """

    def __init__(self, validate: bool = True):
        self.validate = validate

    def convert(self, document: dict) -> dict:
        """Convert without validating."""
        return convert_document(document)

    def run(self, document: dict) -> ConversionResult:
        """Validate the input, convert it, then validate the output.

        Validation issues are recorded, never raised.
        """
        source_version = detect_version(document)
        issues: list[ConversionIssue] = []

        if self.validate:
            issues.extend(validate_input(document))

        converted = convert_document(document)

        if self.validate:
            issues.extend(validate_output(converted))

        return ConversionResult(document=converted, source_version=source_version, issues=issues)
