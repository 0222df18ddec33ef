"""curl command parser.

Understands the subset of curl that the reassembler writes back out,
plus the common long-form aliases:

  - Method: -X/--request <METHOD>; -G/--get is accepted and ignored
  - URL: --url <url> or the first positional argument
  - Headers: -H/--header "Name: Value" (and curl's "Name;" empty form)
  - Body: -d/--data/--data-raw/--data-binary/--data-ascii <payload>
  - Query fields: --data-urlencode 'key=value'

Anything else is skipped.
"""

import shlex

from curl_complete.errors import CurlParseError

from .base import ParsedRequest

DATA_FLAGS = ("-d", "--data", "--data-raw", "--data-binary", "--data-ascii")

# Unsupported flags whose argument must not be mistaken for the URL.
SKIPPED_FLAGS_WITH_ARG = (
    "-o", "--output", "-u", "--user", "-A", "--user-agent", "-e", "--referer",
    "-b", "--cookie", "-c", "--cookie-jar", "-m", "--max-time", "--connect-timeout",
)


def parse_curl(text: str) -> ParsedRequest:
    """Parse a single curl command into a ParsedRequest."""
    try:
        tokens = shlex.split(text, posix=True)
    except ValueError as e:
        raise CurlParseError(f"cannot tokenize curl command: {e}") from e

    if not tokens or tokens[0] != "curl":
        raise CurlParseError("not a curl command")

    method: str | None = None
    url: str | None = None
    headers: dict[str, str] = {}
    fields: dict[str, str] = {}
    data_parts: list[str] = []

    args = iter(tokens[1:])
    for token in args:
        if token in ("-X", "--request"):
            method = _next_arg(args, token)
        elif token.startswith("-X") and len(token) > 2:
            method = token[2:]
        elif token in ("-H", "--header"):
            name, value = _parse_header(_next_arg(args, token))
            headers[name] = value
        elif token in DATA_FLAGS:
            data_parts.append(_next_arg(args, token))
        elif token == "--data-urlencode":
            key, _, value = _next_arg(args, token).partition("=")
            fields[key] = value
        elif token == "--url":
            url = _next_arg(args, token)
        elif token in SKIPPED_FLAGS_WITH_ARG:
            _next_arg(args, token)
        elif token.startswith("-"):
            continue
        elif url is None:
            url = token

    if url is None:
        raise CurlParseError("curl command has no URL")

    body = "&".join(data_parts) if data_parts else None
    if method is None:
        method = "POST" if body else "GET"

    return ParsedRequest(
        method=method,
        url=url,
        headers=headers,
        data_url_encoded=fields,
        body=body,
    )


def _next_arg(args, flag: str) -> str:
    try:
        return next(args)
    except StopIteration:
        raise CurlParseError(f"missing argument for {flag}") from None


def _parse_header(raw: str) -> tuple[str, str]:
    if ":" in raw:
        name, value = raw.split(":", 1)
    elif raw.endswith(";"):
        name, value = raw[:-1], ""
    else:
        raise CurlParseError(f"malformed header: {raw!r}")

    name = name.strip()
    if not name:
        raise CurlParseError(f"malformed header: {raw!r}")
    return name.lower(), value.strip()
