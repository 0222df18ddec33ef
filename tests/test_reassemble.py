import json

from curl_complete.completion.reassemble import format_result, render_request, splice_command
from curl_complete.parser.base import CompletionResult, ParsedRequest

URL = "https://localhost:9000/pets"


class TestRenderRequest:
    def test_bare_request(self):
        assert render_request(ParsedRequest(url=URL)) == f"curl -X GET {URL}"

    def test_url_is_kept_as_typed(self):
        assert render_request(ParsedRequest(url="https://h")) == "curl -X GET https://h"

    def test_query_fields_add_get_flag(self):
        req = ParsedRequest(url=URL, data_url_encoded={"age": "3", "name": '"doggie"'})
        assert render_request(req) == (
            f"curl -X GET -G {URL} --data-urlencode 'age=3' --data-urlencode 'name=\"doggie\"'"
        )

    def test_headers_in_order(self):
        req = ParsedRequest(url=URL, headers={"limit": "20", "x-trace": "abc"})
        assert render_request(req) == f'curl -X GET {URL} -H "limit: 20" -H "x-trace: abc"'

    def test_empty_and_quoted_empty_headers(self):
        req = ParsedRequest(url=URL, headers={"a": "", "b": '""'})
        assert render_request(req) == f'curl -X GET {URL} -H "a: " -H "b: "'

    def test_body_is_pretty_printed(self):
        req = ParsedRequest(method="POST", url=URL, body='{"name":"doggie","tag":"dog"}')
        assert render_request(req) == (
            f"curl -X POST {URL} -d '{{\n  \"name\": \"doggie\",\n  \"tag\": \"dog\"\n}}'"
        )

    def test_body_suppresses_query_fields(self):
        req = ParsedRequest(method="POST", url=URL, body='{"a":1}', data_url_encoded={"age": "3"})
        out = render_request(req)
        assert "-G" not in out
        assert "--data-urlencode" not in out

    def test_unparseable_body(self):
        req = ParsedRequest(method="POST", url=URL, body="name=doggie")
        assert render_request(req) == f"curl -X POST {URL} -d '{{}}'"


class TestSpliceCommand:
    def test_single_segment(self):
        result = splice_command("curl -X GET https://h/pets", 0, "curl -X GET -G https://h/pets")
        assert result.stdout == "curl -X GET -G https://h/pets"
        assert result.cursor_position == len("curl -X GET -G https://h/pets") - 1

    def test_following_segment(self):
        result = splice_command("curl -X GET https://h/pets | jq .", 0, "NEW")
        assert result.stdout == "NEW | jq ."
        assert result.cursor_position == 2

    def test_preceding_segments_count_trimmed_lengths(self):
        result = splice_command('echo -n "test" |  tee x  | curl https://h/pets', 2, "NEW")
        assert result.stdout == 'echo -n "test" | tee x | NEW'
        assert result.cursor_position == len('echo -n "test"') + len("tee x") + 2


class TestFormatResult:
    def test_plain(self):
        assert format_result(CompletionResult(cursor_position=1, stdout="ab"), as_json=False) == "ab"

    def test_json_envelope(self):
        out = format_result(CompletionResult(cursor_position=1, stdout="a | b"), as_json=True)
        assert json.loads(out) == {"cursor_position": 1, "stdout": "a | b"}
