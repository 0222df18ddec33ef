"""OpenAPI document loader.

Reads an OpenAPI 3.x document from disk into plain dicts. ``.json`` files
go through ``json``; everything else through PyYAML.
"""

import json
import logging
from pathlib import Path

import yaml

from curl_complete.errors import SpecNotFoundError, SpecParseError

log = logging.getLogger(__name__)

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class SpecLoader(yaml.SafeLoader):
    """SafeLoader that leaves unquoted dates and timestamps as strings.

    Examples are copied into requests as JSON, so ``2020-01-01`` must stay
    the string it would be in a JSON document.
    """


SpecLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_spec(file_path: Path) -> dict:
    """Load and sanity-check an OpenAPI document."""
    if not file_path.exists():
        raise SpecNotFoundError(f"spec file not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SpecParseError(f"cannot read {file_path}: {e}") from e
    if not text.strip():
        raise SpecParseError(f"spec file is empty: {file_path}")

    if file_path.suffix == ".json":
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as e:
            raise SpecParseError(f"invalid JSON in {file_path}: {e}") from e
    else:
        try:
            doc = yaml.load(text, Loader=SpecLoader)
        except yaml.YAMLError as e:
            raise SpecParseError(f"invalid YAML in {file_path}: {e}") from e

    _check_structure(doc)
    log.debug("loaded %d paths from %s", len(doc["paths"]), file_path)
    return doc


def _check_structure(doc) -> None:
    if not isinstance(doc, dict):
        raise SpecParseError("spec document is not a mapping")
    if not isinstance(doc.get("paths"), dict):
        raise SpecParseError("spec document has no 'paths' mapping")
    components = doc.get("components")
    if components is not None and not isinstance(components, dict):
        raise SpecParseError("'components' must be a mapping")
