"""Operation lookup and parameter table construction."""

import logging

from curl_complete.errors import OperationNotFoundError, SpecParseError
from curl_complete.parser.base import ParameterKind, SpecParameter

from .resolver import ComponentKind, is_reference, resolve

log = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")


def trim_path_prefix(path: str, prefix: str | None) -> str:
    """Drop a caller-supplied prefix (e.g. ``/api/v1``) before path lookup."""
    if not prefix:
        return path
    prefix = prefix.rstrip("/")
    if path == prefix:
        return "/"
    if path.startswith(prefix + "/"):
        return path[len(prefix):]
    return path


def match_operation(spec: dict, path: str, method: str) -> dict:
    """Find the operation for a literal path and an exact HTTP method.

    Path templates are not expanded: ``/pets/{id}`` does not match ``/pets/1``.
    """
    path_item = spec["paths"].get(path)
    if path_item is None:
        raise OperationNotFoundError(f"no path entry for {path}")
    if is_reference(path_item) or not isinstance(path_item, dict):
        raise OperationNotFoundError(f"path entry for {path} is not inline")

    if method not in HTTP_METHODS:
        raise OperationNotFoundError(f"unsupported method {method}")

    operation = path_item.get(method.lower())
    if operation is None:
        raise OperationNotFoundError(f"no {method} operation for {path}")
    if not isinstance(operation, dict):
        raise SpecParseError(f"{method} {path} is not a mapping")

    log.debug("matched operation %s %s", method, path)
    return operation


def build_parameter_table(operation: dict, components: dict | None) -> dict[str, SpecParameter]:
    """Resolve the operation's parameters into a table sorted by name.

    The alphabetical order drives which slot gets filled next; it is not
    the declaration order.
    """
    parameters: dict[str, SpecParameter] = {}
    for ref in operation.get("parameters") or []:
        param = resolve(ref, ComponentKind.PARAMETER, components)
        spec_param = _to_spec_parameter(param)
        parameters[spec_param.name] = spec_param

    return dict(sorted(parameters.items()))


def _to_spec_parameter(param: dict) -> SpecParameter:
    name = param.get("name")
    if not isinstance(name, str):
        raise SpecParseError(f"parameter without a name: {param!r}")

    location = param.get("in")
    if location == "header":
        kind = ParameterKind.HEADER
    elif location == "query":
        kind = ParameterKind.QUERY
    else:
        kind = ParameterKind.OTHER

    return SpecParameter(kind=kind, name=name, example=param.get("example"))
