"""Request body population from ``application/json`` examples."""

import json
import logging
from typing import Any

from curl_complete.parser.base import Completion, CompletionAction, ParsedRequest

from .resolver import ComponentKind, resolve
from .selector import COMPACT_SEPARATORS

log = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def body_text(example: Any) -> str:
    """Serialize an example for the request body, ``{}`` if it can't be."""
    try:
        return json.dumps(example, ensure_ascii=False, separators=COMPACT_SEPARATORS)
    except (TypeError, ValueError):
        return "{}"


def populate_body(request: ParsedRequest, operation: dict, components: dict | None) -> Completion:
    """Fill the request body from the operation's JSON example.

    A media-type example wins over a schema example. Declaring a JSON media
    type is enough to set the Content-Type and Accept headers, even when no
    example is found.
    """
    body_ref = operation.get("requestBody")
    if body_ref is None:
        return Completion()

    request_body = resolve(body_ref, ComponentKind.REQUEST_BODY, components)
    media_type = (request_body.get("content") or {}).get(JSON_MEDIA_TYPE)
    if media_type is None:
        log.debug("request body has no %s content", JSON_MEDIA_TYPE)
        return Completion()

    request.headers["content-type"] = JSON_MEDIA_TYPE
    request.headers["accept"] = JSON_MEDIA_TYPE

    if media_type.get("example") is not None:
        log.debug("using media type example for request body")
        return _set_body(request, media_type["example"])

    schema_ref = media_type.get("schema")
    if schema_ref is None:
        return Completion()

    schema = resolve(schema_ref, ComponentKind.SCHEMA, components)
    # Compositions (allOf/oneOf/...) without a type carry no usable example.
    if "type" in schema and schema.get("example") is not None:
        log.debug("using schema example for request body")
        return _set_body(request, schema["example"])

    return Completion()


def _set_body(request: ParsedRequest, example: Any) -> Completion:
    request.body = body_text(example)
    return Completion(action=CompletionAction.BODY, value=request.body)
