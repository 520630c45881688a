import pytest

from openapi_upgrade.converter.refs import REF_PREFIXES, convert_ref_node, rewrite_ref


class TestRewriteRef:
    @pytest.mark.parametrize(
        "legacy, modern",
        [
            ("definitions", "components/schemas"),
            ("parameters", "components/parameters"),
            ("responses", "components/responses"),
            ("securityDefinitions", "components/securitySchemes"),
        ],
    )
    def test_legacy_container_maps_to_components(self, legacy, modern):
        assert rewrite_ref(f"#/{legacy}/Pet") == f"#/{modern}/Pet"

    def test_name_with_slashes_kept_intact(self):
        assert rewrite_ref("#/definitions/a/b") == "#/components/schemas/a/b"

    @pytest.mark.parametrize(
        "ref",
        [
            "#/components/schemas/Pet",
            "other.yaml#/definitions/Pet",
            "https://example.com/schemas/pet.json",
            "#/paths/~1users",
            "#/definitionsPet",
            "",
        ],
    )
    def test_other_references_unchanged(self, ref):
        assert rewrite_ref(ref) == ref

    @pytest.mark.parametrize(
        "ref",
        ["#/definitions/User", "#/responses/NotFound", "#/components/schemas/X", "foo"],
    )
    def test_idempotent(self, ref):
        assert rewrite_ref(rewrite_ref(ref)) == rewrite_ref(ref)

    def test_prefix_table_has_four_entries(self):
        assert len(REF_PREFIXES) == 4


class TestConvertRefNode:
    def test_drops_siblings(self):
        node = {"$ref": "#/definitions/User", "description": "ignored"}
        assert convert_ref_node(node) == {"$ref": "#/components/schemas/User"}
