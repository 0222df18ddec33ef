"""Data models shared by the parsers and the completion engine.

The curl parser produces a ``ParsedRequest``; the OpenAPI side produces
``SpecParameter`` entries; the selector and body populator describe what
they changed with a ``Completion``.
"""

from enum import Enum
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel


class ParameterKind(str, Enum):
    """Where a parameter lives. Only headers and query fields are filled."""

    HEADER = "header"
    QUERY = "query"
    OTHER = "other"  # path / cookie


class SpecParameter(BaseModel):
    """A resolved OpenAPI parameter reduced to what completion needs."""

    kind: ParameterKind
    name: str
    example: Any = None


class ParsedRequest(BaseModel):
    """A curl invocation broken into its HTTP parts.

    Header names are stored lower-cased. ``data_url_encoded`` holds the
    ``--data-urlencode`` fields in command-line order.
    """

    method: str = "GET"
    url: str
    headers: dict[str, str] = {}
    data_url_encoded: dict[str, str] = {}
    body: str | None = None

    @property
    def path(self) -> str:
        url = self.url if "://" in self.url else f"http://{self.url}"
        return urlsplit(url).path or "/"

    def has_body(self) -> bool:
        return bool(self.body)


class CompletionAction(str, Enum):
    HEADER = "header"
    QUERY = "query"
    BODY = "body"
    NOOP = "noop"


class Completion(BaseModel):
    """The single edit chosen for one run.

    ``cleared`` is the emptied slot that was dropped before the fill, if the
    run advanced past a previously inserted value.
    """

    action: CompletionAction = CompletionAction.NOOP
    name: str = ""
    value: str = ""
    cleared: SpecParameter | None = None


class CompletionResult(BaseModel):
    """Rewritten pipeline plus where the line editor should put the cursor."""

    cursor_position: int
    stdout: str
