"""CLI entry point for curl-complete.

Reads a shell pipeline from stdin and prints it back with the curl segment
completed. On any failure the input is echoed unchanged.
"""

import logging
import sys
from pathlib import Path

import click

from curl_complete.completion.pipeline import complete_command, locate_curl_segment
from curl_complete.completion.reassemble import format_result
from curl_complete.errors import CompletionError
from curl_complete.parser.openapi import load_spec

log = logging.getLogger(__name__)


@click.command()
@click.option("-s", "--spec", "spec_path", required=True, type=click.Path(path_type=Path), help="Path to the OpenAPI specification file.")
@click.option("-j", "--json", "json_out", is_flag=True, help="Print JSON with the suggested cursor position.")
@click.option("--path-prefix", default=None, help="Prefix to strip from the request path before matching, e.g. /api/v1.")
@click.option("-v", "--verbose", is_flag=True, help="Log completion decisions to stderr.")
def main(spec_path: Path, json_out: bool, path_prefix: str | None, verbose: bool):
    """Complete the next header, query parameter or body of a curl command."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    buffer = click.get_text_stream("stdin").read()

    position = locate_curl_segment(buffer)
    if position is None:
        click.echo(buffer, nl=False)
        return

    try:
        spec = load_spec(spec_path)
        result = complete_command(buffer, position, spec, path_prefix=path_prefix)
    except CompletionError as e:
        log.debug("leaving command unchanged: %s", e)
        click.echo(buffer, nl=False)
        sys.exit(1)

    click.echo(format_result(result, json_out), nl=False)
