from curl_complete.parser.base import (
    Completion,
    CompletionAction,
    CompletionResult,
    ParameterKind,
    ParsedRequest,
    SpecParameter,
)


class TestParsedRequest:
    def test_defaults(self):
        req = ParsedRequest(url="https://localhost:9000/pets")
        assert req.method == "GET"
        assert req.headers == {}
        assert req.data_url_encoded == {}
        assert req.body is None
        assert req.has_body() is False

    def test_path_ignores_query_string(self):
        req = ParsedRequest(url="https://localhost:9000/pets?limit=1")
        assert req.path == "/pets"

    def test_path_without_scheme(self):
        req = ParsedRequest(url="localhost:9000/pets")
        assert req.path == "/pets"

    def test_path_defaults_to_root(self):
        req = ParsedRequest(url="https://localhost:9000")
        assert req.path == "/"

    def test_empty_body_is_not_a_body(self):
        req = ParsedRequest(url="https://localhost:9000/pets", body="")
        assert req.has_body() is False

    def test_instances_do_not_share_maps(self):
        a = ParsedRequest(url="https://a/pets")
        b = ParsedRequest(url="https://b/pets")
        a.headers["x"] = "1"
        assert b.headers == {}


class TestSpecParameter:
    def test_example_is_optional(self):
        p = SpecParameter(kind=ParameterKind.QUERY, name="limit")
        assert p.example is None

    def test_example_keeps_structure(self):
        p = SpecParameter(kind=ParameterKind.HEADER, name="x-filter", example={"a": [1, 2]})
        assert p.example == {"a": [1, 2]}


class TestCompletion:
    def test_default_is_noop(self):
        c = Completion()
        assert c.action is CompletionAction.NOOP
        assert c.cleared is None

    def test_result_serializes_in_field_order(self):
        result = CompletionResult(cursor_position=3, stdout="curl")
        assert result.model_dump_json() == '{"cursor_position":3,"stdout":"curl"}'
