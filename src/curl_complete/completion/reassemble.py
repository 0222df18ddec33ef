"""Turn the completed request back into curl text inside its pipeline."""

import json

from curl_complete.parser.base import CompletionResult, ParsedRequest

PIPE_SEPARATOR = " | "


def render_request(request: ParsedRequest) -> str:
    """Serialize a request as a curl command."""
    get_flag = "-G " if not request.has_body() and request.data_url_encoded else ""
    parts = [f"curl -X {request.method} {get_flag}{request.url}"]

    for name, value in request.headers.items():
        shown = "" if value in ("", '""') else value
        parts.append(f'-H "{name}: {shown}"')

    if request.has_body():
        parts.append(f"-d '{_pretty_json(request.body)}'")
    elif request.data_url_encoded:
        parts.extend(f"--data-urlencode '{key}={value}'" for key, value in request.data_url_encoded.items())

    return " ".join(parts)


def _pretty_json(body: str) -> str:
    try:
        value = json.loads(body)
    except json.JSONDecodeError:
        return "{}"
    return json.dumps(value, indent=2, ensure_ascii=False)


def splice_command(buffer: str, position: int, command: str) -> CompletionResult:
    """Replace the ``position``-th pipeline segment with ``command``.

    The cursor lands on the last character of the new command, offset by
    the trimmed lengths of the segments before it.
    """
    segments = [segment.strip() for segment in buffer.split("|")]
    segments[position] = command
    cursor = sum(len(segment) for segment in segments[:position]) + len(command) - 1
    return CompletionResult(cursor_position=cursor, stdout=PIPE_SEPARATOR.join(segments))


def format_result(result: CompletionResult, as_json: bool) -> str:
    if as_json:
        return result.model_dump_json()
    return result.stdout
