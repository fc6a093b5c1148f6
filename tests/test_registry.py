"""
Tests for the schema registry client and the settings that locate the artifact.
"""

import httpx
import pytest

from library_api.config import Settings
from library_api.registry import FetchError, ParseError, RegistryError, load_schema, parse_schema

URL = "http://registry.test/apis/registry/v3/groups/g/artifacts/a/versions/1/content"


class TestContentUrl:

    def test_default_coordinates(self):
        assert Settings().content_url == (
            "http://localhost:8080/apis/registry/v3"
            "/groups/group001/artifacts/library-api/versions/1.0.0/content"
        )

    def test_trailing_slash_on_base_url(self):
        settings = Settings(registry_url="http://registry.test/apis/registry/v3/")
        assert settings.content_url.startswith("http://registry.test/apis/registry/v3/groups/")

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("REGISTRY_URL", "http://other:9090/apis/registry/v3")
        monkeypatch.setenv("REGISTRY_GROUP_ID", "books")
        monkeypatch.setenv("REGISTRY_ARTIFACT_VERSION", "2.0.0")
        monkeypatch.setenv("PORT", "8081")

        settings = Settings.from_env()

        assert settings.content_url == (
            "http://other:9090/apis/registry/v3"
            "/groups/books/artifacts/library-api/versions/2.0.0/content"
        )
        assert settings.port == 8081

    def test_env_absent_keeps_defaults(self, monkeypatch):
        for name in ("REGISTRY_URL", "REGISTRY_GROUP_ID", "REGISTRY_ARTIFACT_ID",
                     "REGISTRY_ARTIFACT_VERSION", "HOST", "PORT"):
            monkeypatch.delenv(name, raising=False)

        assert Settings.from_env() == Settings()


class TestLoadSchema:

    def test_yaml_document(self, registry, schema_as_json):
        seen = []
        document = load_schema(URL, transport=registry(seen=seen))

        assert document == schema_as_json
        assert seen == [URL]

    def test_json_document(self, registry):
        document = load_schema(URL, transport=registry(body='{"openapi": "3.1.0", "paths": {}}'))
        assert document == {"openapi": "3.1.0", "paths": {}}

    def test_non_200_is_fetch_error(self, registry):
        with pytest.raises(FetchError, match="status: 404"):
            load_schema(URL, transport=registry(status_code=404, body="not found"))

    def test_unreachable_registry_is_fetch_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError):
            load_schema(URL, transport=httpx.MockTransport(refuse))

    def test_malformed_yaml_is_parse_error(self, registry):
        with pytest.raises(ParseError):
            load_schema(URL, transport=registry(body="openapi: [3.0.0\ninfo: {"))

    def test_errors_share_a_base_class(self):
        assert issubclass(FetchError, RegistryError)
        assert issubclass(ParseError, RegistryError)


class TestParseSchema:

    @pytest.mark.parametrize("body", ["just a string", "- a\n- b\n", ""])
    def test_top_level_must_be_a_mapping(self, body):
        with pytest.raises(ParseError):
            parse_schema(body)

    def test_nested_values_are_kept(self):
        document = parse_schema("a:\n  b: [1, 2.5, true, null, text]\n")
        assert document == {"a": {"b": [1, 2.5, True, None, "text"]}}
