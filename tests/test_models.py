from cosmos_swagger_gen.parser.base import MethodData, Parameter, PathItem, Schema, SourceDocument


class TestSchema:
    def test_reference_node(self):
        s = Schema.model_validate({"$ref": "#/definitions/Coin"})
        assert s.is_reference is True
        assert s.ref == "#/definitions/Coin"
        assert s.type is None

    def test_plain_schema_is_not_reference(self):
        s = Schema.model_validate({"type": "string"})
        assert s.is_reference is False

    def test_comment_prefers_title(self):
        s = Schema(type="string", title="Title", description="Description")
        assert s.comment == "Title"

    def test_comment_falls_back_to_description(self):
        s = Schema(type="string", description="Description")
        assert s.comment == "Description"

    def test_nested_properties_keep_order(self):
        s = Schema.model_validate({
            "type": "object",
            "properties": {"b": {"type": "string"}, "a": {"type": "array", "items": {"type": "integer"}}},
        })
        assert list(s.properties) == ["b", "a"]
        assert s.properties["a"].items.type == "integer"


class TestParameter:
    def test_in_alias(self):
        p = Parameter.model_validate({"name": "height", "in": "path", "format": "int64"})
        assert p.location == "path"
        assert p.format == "int64"
        assert p.description is None

    def test_body_schema(self):
        p = Parameter.model_validate({"name": "body", "in": "body", "schema": {"$ref": "#/definitions/Tx"}})
        assert p.schema_.is_reference

    def test_reference_parameter(self):
        p = Parameter.model_validate({"$ref": "#/parameters/Limit"})
        assert p.is_reference
        assert p.name is None
        assert p.location is None


class TestMethodData:
    def test_integer_status_codes_become_strings(self):
        m = MethodData.model_validate({
            "operationId": "health",
            "responses": {200: {"description": "ok", "schema": {}}, "default": {"description": "err"}},
        })
        assert set(m.responses) == {"200", "default"}
        assert m.responses["default"].schema_ is None


class TestPathItem:
    def test_declared_methods_include_other_verbs(self):
        item = PathItem.model_validate({"put": {"operationId": "update"}})
        assert item.get is None
        assert item.post is None
        assert item.declared_methods() == ["put"]

    def test_declared_methods_get_and_post(self):
        item = PathItem.model_validate({"post": {"operationId": "a"}, "get": {"operationId": "b"}})
        assert item.declared_methods() == ["get", "post"]


class TestSourceDocument:
    def test_numeric_version_is_stringified(self):
        doc = SourceDocument.model_validate({"swagger": 2.0, "paths": {}})
        assert doc.swagger == "2.0"
        assert doc.definitions == {}
