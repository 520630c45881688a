"""Rewrite Swagger 2.0 reference pointers to their OpenAPI 3 locations."""

REF_PREFIXES = {
    "#/definitions/": "#/components/schemas/",
    "#/parameters/": "#/components/parameters/",
    "#/responses/": "#/components/responses/",
    "#/securityDefinitions/": "#/components/securitySchemes/",
}


def rewrite_ref(ref: str) -> str:
    """Map a legacy `#/<container>/<name>` pointer to `#/components/...`.

    Pointers that are already modern, external or unknown come back unchanged.
    """
    if not isinstance(ref, str):
        return ref
    for legacy, modern in REF_PREFIXES.items():
        if ref.startswith(legacy):
            return modern + ref[len(legacy):]
    return ref


def convert_ref_node(node: dict) -> dict:
    """Return a node holding only the rewritten `$ref` of the given node."""
    return {"$ref": rewrite_ref(node["$ref"])}
