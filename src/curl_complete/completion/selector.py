"""Completion selector: picks the one header or query field to fill next.

Parameters are visited in alphabetical order. Two cases:

  - A declared parameter is present on the request with an empty value
    (the user cleared a value inserted by an earlier run). That slot is
    dropped and the next parameter after it, wrapping around, that is not
    already populated gets filled instead.
  - Otherwise the first declared parameter missing from the request is
    added.

Only one field is ever added per run.
"""

import json
import logging
from typing import Any

from curl_complete.parser.base import (
    Completion,
    CompletionAction,
    ParameterKind,
    ParsedRequest,
    SpecParameter,
)

log = logging.getLogger(__name__)

INVALID_HEADER_VALUE = "invalid"
COMPACT_SEPARATORS = (",", ":")


def header_value(example: Any) -> str:
    """JSON text of the example, or ``""`` when there is none."""
    try:
        value = json.dumps("" if example is None else example, ensure_ascii=False, separators=COMPACT_SEPARATORS)
    except (TypeError, ValueError):
        return INVALID_HEADER_VALUE
    if not _is_valid_header_value(value):
        return INVALID_HEADER_VALUE
    return value


def query_value(example: Any) -> str:
    """JSON text of the example, or the empty string when there is none."""
    if example is None:
        return ""
    try:
        return json.dumps(example, ensure_ascii=False, separators=COMPACT_SEPARATORS)
    except (TypeError, ValueError):
        return str(example)


def _is_valid_header_value(value: str) -> bool:
    return all(c == "\t" or " " <= c <= "~" for c in value)


def _lookup(request: ParsedRequest, param: SpecParameter) -> str | None:
    if param.kind is ParameterKind.HEADER:
        return request.headers.get(param.name.lower())
    if param.kind is ParameterKind.QUERY:
        return request.data_url_encoded.get(param.name)
    return None


def find_empty_slot(parameters: dict[str, SpecParameter], request: ParsedRequest) -> int | None:
    """Index of the first declared parameter present with an empty value."""
    for index, param in enumerate(parameters.values()):
        value = _lookup(request, param)
        if value == "":
            return index
    return None


def select_completion(parameters: dict[str, SpecParameter], request: ParsedRequest) -> Completion:
    """Decide which parameter to fill without touching the request."""
    ordered = list(parameters.values())
    slot_index = find_empty_slot(parameters, request)

    if slot_index is None:
        for param in ordered:
            if param.kind is ParameterKind.OTHER or _lookup(request, param) is not None:
                continue
            return _fill(param)
        return Completion()

    slot = ordered[slot_index]
    if slot.kind is ParameterKind.HEADER:
        populated = {name for name, value in request.headers.items() if value}
    else:
        populated = {name for name, value in request.data_url_encoded.items() if value}

    replacement = _next_unpopulated(ordered, slot_index, slot.kind, populated)
    log.debug("slot %s is empty, advancing to %s", slot.name, replacement.name)
    completion = _fill(replacement)
    completion.cleared = slot
    return completion


def _next_unpopulated(
    ordered: list[SpecParameter],
    slot_index: int,
    slot_kind: ParameterKind,
    populated: set[str],
) -> SpecParameter:
    # Candidates of either kind are checked against the slot kind's names.
    # After one full lap the walk stops wherever it is, populated or not.
    count = len(ordered)
    index = (slot_index + 1) % count
    for _ in range(count):
        candidate = ordered[index]
        name = candidate.name.lower() if slot_kind is ParameterKind.HEADER else candidate.name
        if name not in populated:
            break
        index = (index + 1) % count
    return ordered[index]


def _fill(param: SpecParameter) -> Completion:
    if param.kind is ParameterKind.HEADER:
        return Completion(action=CompletionAction.HEADER, name=param.name, value=header_value(param.example))
    if param.kind is ParameterKind.QUERY:
        return Completion(action=CompletionAction.QUERY, name=param.name, value=query_value(param.example))
    return Completion()


def apply_completion(request: ParsedRequest, completion: Completion) -> None:
    """Write a header or query completion onto the request."""
    cleared = completion.cleared
    if cleared is not None:
        if cleared.kind is ParameterKind.HEADER:
            request.headers.pop(cleared.name.lower(), None)
        else:
            request.data_url_encoded.pop(cleared.name, None)

    if completion.action is CompletionAction.HEADER:
        request.headers[completion.name.lower()] = completion.value
    elif completion.action is CompletionAction.QUERY:
        request.data_url_encoded[completion.name] = completion.value


def complete_parameters(parameters: dict[str, SpecParameter], request: ParsedRequest) -> Completion:
    """Select the next parameter and apply it to the request."""
    completion = select_completion(parameters, request)
    apply_completion(request, completion)
    if completion.action is not CompletionAction.NOOP:
        log.debug("filled %s %s=%r", completion.action.value, completion.name, completion.value)
    return completion
