"""End-to-end completion of the curl segment in a shell pipeline."""

import logging

from curl_complete.parser.base import CompletionResult
from curl_complete.parser.curl import parse_curl

from .body import populate_body
from .matcher import build_parameter_table, match_operation, trim_path_prefix
from .reassemble import render_request, splice_command
from .selector import complete_parameters

log = logging.getLogger(__name__)


def locate_curl_segment(buffer: str) -> int | None:
    """Index of the first ``|``-separated segment that starts with ``curl``."""
    for index, segment in enumerate(buffer.split("|")):
        if segment.strip().startswith("curl"):
            return index
    return None


def complete_command(
    buffer: str,
    position: int,
    spec: dict,
    path_prefix: str | None = None,
) -> CompletionResult:
    """Complete the curl segment at ``position`` using ``spec``.

    Raises a ``CompletionError`` subclass when the command can't be
    completed; nothing is rendered until every step has succeeded.
    """
    curl_text = buffer.split("|")[position].strip()
    request = parse_curl(curl_text)

    path = trim_path_prefix(request.path, path_prefix)
    operation = match_operation(spec, path, request.method)
    components = spec.get("components")

    parameters = build_parameter_table(operation, components)
    complete_parameters(parameters, request)

    if not request.has_body():
        populate_body(request, operation, components)

    command = render_request(request)
    log.debug("rewrote segment %d as %r", position, command)
    return splice_command(buffer, position, command)
