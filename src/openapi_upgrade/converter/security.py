"""Security requirement and security scheme conversion."""

import copy
import logging

from .fields import compact, pick

logger = logging.getLogger(__name__)

# Fields kept for each explicitly typed security scheme.
SCHEME_FIELDS = {
    "http": ("scheme", "bearerFormat", "description"),
    "apiKey": ("name", "in", "description"),
    "oauth2": ("flows", "description"),
    "openIdConnect": ("openIdConnectUrl", "description"),
}


def convert_security(security: list[dict] | None) -> list[dict] | None:
    """Copy security requirement objects (scheme name -> scope list)."""
    if security is None:
        return None
    return [
        copy.deepcopy(dict(requirement))
        for requirement in security
        if isinstance(requirement, dict)
    ]


def convert_security_schemes(schemes: dict | None) -> dict | None:
    if schemes is None:
        return None
    return {
        name: convert_security_scheme(name, scheme)
        for name, scheme in schemes.items()
        if isinstance(scheme, dict)
    }


def convert_security_scheme(name: str, scheme: dict) -> dict:
    """Convert one scheme, classifying records without a known `type`.

    An untyped `Authorization` header is taken to be a JWT bearer token;
    anything else untyped becomes an API key with the given name/in.
    """
    scheme_type = scheme.get("type")
    if scheme_type in SCHEME_FIELDS:
        return {"type": scheme_type, **pick(scheme, SCHEME_FIELDS[scheme_type])}

    if scheme.get("name") == "Authorization" and scheme.get("in") == "header":
        logger.debug("Security scheme %r reinterpreted as HTTP bearer (JWT)", name)
        return compact(
            type="http",
            scheme="bearer",
            bearerFormat="JWT",
            description=scheme.get("description"),
        )

    logger.debug("Security scheme %r with type %r reinterpreted as apiKey", name, scheme_type)
    return {"type": "apiKey", **pick(scheme, SCHEME_FIELDS["apiKey"])}
