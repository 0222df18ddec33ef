"""Errors raised while completing a curl command.

Every error is terminal for a run: the CLI catches ``CompletionError``,
echoes stdin unchanged and exits with status 1.
"""


class CompletionError(Exception):
    """Base class for failures that abort a completion run."""


class SpecNotFoundError(CompletionError):
    """The OpenAPI document path does not exist."""


class SpecParseError(CompletionError):
    """The OpenAPI document is empty or not a usable OpenAPI structure."""


class CurlParseError(CompletionError):
    """The curl segment could not be parsed into a request."""


class OperationNotFoundError(CompletionError):
    """No path entry or operation matches the request."""


class UnresolvedReferenceError(CompletionError):
    """A ``$ref`` points at a missing component."""
