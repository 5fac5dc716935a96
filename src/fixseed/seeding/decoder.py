"""
Decoders turning substituted fixture text into labeled raw records.

A decoder takes the text of one fixture file and returns an ordered mapping
of record label to raw record. Structural problems are reported as
``ValueError``; the loader attaches the file name.
"""

import json
from pathlib import Path
from typing import Any, Callable, Mapping, Union

import yaml

Decoder = Callable[[str], Mapping[str, Any]]


def _labeled(data: Any, format_name: str) -> dict[str, Any]:
    """Check the top level is a mapping and normalise its labels to text."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"top level of a {format_name} fixture must be a mapping of labels to records, "
            f"got {type(data).__name__}"
        )
    return {str(label): record for label, record in data.items()}


def decode_yaml(text: str) -> dict[str, Any]:
    """Decode a YAML document into labeled records."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(str(e)) from e
    return _labeled(data, "YAML")


def decode_json(text: str) -> dict[str, Any]:
    """Decode a JSON document into labeled records."""
    if not text.strip():
        return {}
    # JSONDecodeError is already a ValueError
    return _labeled(json.loads(text), "JSON")


_DECODERS_BY_SUFFIX: dict[str, Decoder] = {
    ".yml": decode_yaml,
    ".yaml": decode_yaml,
    ".json": decode_json,
}


def decoder_for(filename: Union[str, Path]) -> Decoder:
    """Pick a decoder from the file suffix, defaulting to YAML."""
    return _DECODERS_BY_SUFFIX.get(Path(filename).suffix.lower(), decode_yaml)
